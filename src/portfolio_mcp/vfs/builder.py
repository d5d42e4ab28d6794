"""Build the read-only virtual tree from a content record.

Layout:

    /about/about.txt
    /projects/<project-id>/README.md
    /skills/skills.txt
    /experience/experience.txt
    /contact/contact.txt
    /blog/<post-id>.md
    /links/links.txt
"""

from functools import partial

from portfolio_mcp.content import PortfolioContent
from portfolio_mcp.vfs.formatter import SectionFormatter
from portfolio_mcp.vfs.nodes import DirectoryNode, FileNode


def build_tree(content: PortfolioContent) -> DirectoryNode:
    """Snapshot the content record into a tree rooted at "" (shown as "/").

    Files render lazily from `content`; the returned tree is never mutated.
    Building twice from the same record yields the same names at every level.
    """
    fmt = SectionFormatter

    projects = DirectoryNode.of(
        "projects",
        (
            DirectoryNode.of(
                project.id,
                [FileNode("README.md", partial(fmt.format_project_readme, project))],
            )
            for project in content.projects
        ),
    )
    blog = DirectoryNode.of(
        "blog",
        (FileNode(f"{post.id}.md", partial(fmt.format_blog_post, post)) for post in content.blog),
    )

    return DirectoryNode.of(
        "",
        [
            DirectoryNode.of("about", [FileNode("about.txt", partial(fmt.format_about_file, content))]),
            projects,
            DirectoryNode.of("skills", [FileNode("skills.txt", partial(fmt.format_skills_file, content))]),
            DirectoryNode.of(
                "experience", [FileNode("experience.txt", partial(fmt.format_experience_file, content))]
            ),
            DirectoryNode.of("contact", [FileNode("contact.txt", partial(fmt.format_contact_file, content))]),
            blog,
            DirectoryNode.of("links", [FileNode("links.txt", partial(fmt.format_links_file, content))]),
        ],
    )
