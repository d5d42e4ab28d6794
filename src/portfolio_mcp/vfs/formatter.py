"""Plain-text formatter for portfolio content.

Two families of layouts:

- ``format_*_file``: contents of the virtual tree's files (read with ``cat``)
- ``format_section``: output of the shell's direct section commands
  (``about``, ``projects``, ...), which print an explicit placeholder when a
  section is empty
"""

from typing import Callable, Dict

from portfolio_mcp.content import BlogPost, PortfolioContent, Project

# Direct section commands, in help/completion order
SECTION_NAMES = ("about", "projects", "skills", "experience", "contact", "blog", "links")


class SectionFormatter:
    """Format portfolio content as terminal text.

    This class provides static methods only; every method is a pure function
    of the content record it receives.
    """

    # -- tree files ---------------------------------------------------------

    @staticmethod
    def format_about_file(content: PortfolioContent) -> str:
        parts = [content.full_name, content.education, "", content.summary]
        if content.learning:
            parts += ["", "Learning:"] + [f"- {note}" for note in content.learning]
        if content.contributions:
            parts += ["", "Contributions:"] + [f"- {item}" for item in content.contributions]
        return "\n".join(parts)

    @staticmethod
    def format_project_readme(project: Project) -> str:
        parts = [
            f"# {project.title}",
            "",
            project.description,
            "",
            f"Tech: {', '.join(project.technologies)}",
        ]
        parts += [f"- [{link.label}]({link.href})" for link in project.links]
        return "\n".join(parts)

    @staticmethod
    def format_skills_file(content: PortfolioContent) -> str:
        skills = content.skills
        return "\n".join(
            [
                f"Core: {', '.join(skills.core_stack)}",
                f"Domains: {', '.join(skills.domains)}",
                f"Interests: {', '.join(skills.interests)}",
            ]
        )

    @staticmethod
    def format_experience_file(content: PortfolioContent) -> str:
        return "\n".join(
            f"- {entry.role} @ {entry.company} ({entry.period})\n  {entry.summary}"
            for entry in content.experience
        )

    @staticmethod
    def format_contact_file(content: PortfolioContent) -> str:
        return "\n".join(f"- {channel}: {value}" for channel, value in content.contact_items())

    @staticmethod
    def format_blog_post(post: BlogPost) -> str:
        text = f"# {post.title}\n{post.date}\n\n{post.excerpt}"
        if post.url:
            text += f"\n\nLink: {post.url}"
        return text

    @staticmethod
    def format_links_file(content: PortfolioContent) -> str:
        return "\n".join(f"- {link.label}: {link.href}" for link in content.links)

    # -- direct section commands ---------------------------------------------

    @staticmethod
    def format_section(section: str, content: PortfolioContent) -> str:
        """Render one section for the shell's direct section commands.

        Args:
            section: One of SECTION_NAMES
            content: Content record

        Returns:
            Section text, or "Unknown section." for names outside SECTION_NAMES
        """
        renderer = _SECTION_RENDERERS.get(section)
        if renderer is None:
            return "Unknown section."
        return renderer(content)

    @staticmethod
    def _about(content: PortfolioContent) -> str:
        return SectionFormatter.format_about_file(content)

    @staticmethod
    def _projects(content: PortfolioContent) -> str:
        blocks = []
        for index, project in enumerate(content.projects, start=1):
            links = " • ".join(f"{link.label}: {link.href}" for link in project.links)
            block = (
                f"{index}. {project.title} [{project.id}]\n"
                f"   Tech: {', '.join(project.technologies)}\n"
                f"   {project.description}"
            )
            if links:
                block += f"\n   {links}"
            blocks.append(block)
        return "\n\n".join(blocks) or "No projects."

    @staticmethod
    def _experience(content: PortfolioContent) -> str:
        return (
            "\n\n".join(
                f"- {entry.role} @ {entry.company} ({entry.period})\n  {entry.summary}"
                for entry in content.experience
            )
            or "No experience."
        )

    @staticmethod
    def _contact(content: PortfolioContent) -> str:
        return SectionFormatter.format_contact_file(content) or "No contact info."

    @staticmethod
    def _blog(content: PortfolioContent) -> str:
        blocks = []
        for post in content.blog:
            block = f"- {post.title} ({post.date})\n  {post.excerpt}"
            if post.url:
                block += f"\n  {post.url}"
            blocks.append(block)
        return "\n\n".join(blocks) or "No blog posts."

    @staticmethod
    def _links(content: PortfolioContent) -> str:
        return SectionFormatter.format_links_file(content) or "No links."


_SECTION_RENDERERS: Dict[str, Callable[[PortfolioContent], str]] = {
    "about": SectionFormatter._about,
    "projects": SectionFormatter._projects,
    "skills": SectionFormatter.format_skills_file,
    "experience": SectionFormatter._experience,
    "contact": SectionFormatter._contact,
    "blog": SectionFormatter._blog,
    "links": SectionFormatter._links,
}
