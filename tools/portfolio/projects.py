from __future__ import annotations

from typing import Tuple

from .models import Project

PROJECTS: Tuple[Project, ...] = (
    Project(
        name="ConnectYou",
        description="Lightweight & clean version of LinkTree. It's Cool 😎.",
        link="https://connect-you.vercel.app/",
    ),
    Project(
        name="Taskmaster",
        description="A minimal all-in-one task manager that suits your needs.",
        link="https://github.com/rocketburst/taskmaster/",
    ),
    Project(
        name="Portfolio",
        description="The minimal website you're looking at",
        link="https://github.com/rocketburst/portfolio/",
    ),
)
