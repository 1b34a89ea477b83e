import re
from dataclasses import replace
from datetime import date

import pytest

from tools.portfolio.pages import make_env, render_home, render_post, render_post_list
from tools.portfolio.posts import sort_posts
from tools.portfolio.projects import PROJECTS


@pytest.fixture
def env():
    return make_env()


def _card_titles(html: str):
    return re.findall(r'<p class="link">(.*?)</p>', html)


def test_home_renders_three_project_cards(env, site, posts):
    html = render_home(env, site, posts)
    assert len(PROJECTS) == 3
    assert html.count('class="not-prose project-card"') == 3
    for project in PROJECTS:
        assert f'href="{project.link}"' in html


def test_home_shows_four_most_recent_posts(env, site, posts):
    html = render_home(env, site, posts)
    expected = [p.title for p in sort_posts(posts)[:4]]
    assert _card_titles(html) == expected
    assert html.count('class="not-prose blog-post-card"') == 4
    assert 'href="/posts"' in html


def test_home_with_few_posts(env, site, posts):
    html = render_home(env, site, posts[:2])
    assert html.count('class="not-prose blog-post-card"') == 2


def test_blog_card_shows_compact_date(env, site, posts):
    html = render_home(env, site, posts)
    # 2023-06-30 is the newest post
    assert '<p class="post-date"> June 30th, 2023</p>' in html
    assert "Friday" not in html


def test_post_list_shows_all_posts_newest_first(env, site, posts):
    html = render_post_list(env, site, posts)
    titles = re.findall(r"<h2>(.*?)</h2>", html)
    assert titles == [p.title for p in sort_posts(posts)]
    assert "<title>tester · blog</title>" in html


def test_post_list_description_only_when_present(env, site, make_post):
    with_desc = make_post(1, date(2023, 1, 2), description="Has one")
    without = make_post(2, date(2023, 1, 1), description=None)
    html = render_post_list(env, site, [with_desc, without])
    assert html.count("<p>Has one</p>") == 1
    assert html.count('<article class="post-summary">') == 2
    assert 'href="/posts/post-2"' in html


def test_post_page(env, site, posts):
    ordered = sort_posts(posts)
    middle = ordered[2]
    html = render_post(env, site, middle, ordered)
    assert f"<h1>{middle.title}</h1>" in html
    assert middle.body_html in html
    assert f'class="newer" href="{ordered[1].path}"' in html
    assert f'class="older" href="{ordered[3].path}"' in html


def test_post_page_alone_has_no_nav_links(env, site, make_post):
    post = make_post(1, date(2024, 6, 1))
    html = render_post(env, site, post)
    assert "Saturday, June 1st, 2024" in html
    assert 'class="newer"' not in html
    assert 'class="older"' not in html


def test_titles_are_escaped(env, site, make_post):
    post = make_post(1, date(2024, 6, 1))
    post = replace(post, title="<script>x</script>")
    html = render_post_list(env, site, [post])
    assert "<script>x</script>" not in html
    assert "&lt;script&gt;x&lt;/script&gt;" in html


def test_header_and_footer(env, site, posts):
    html = render_home(env, site, posts)
    assert 'href="/rss.xml"' in html
    assert 'href="/sitemap.xml"' in html
    assert 'href="mailto:me@example.com"' in html
    assert '<a href="/posts">Blog</a>' in html
