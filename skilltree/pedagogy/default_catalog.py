"""
Bundled sample program, used when no catalog file is configured.
"""

from skilltree.schemas.catalog import Catalog, Category, Course, Year


def default_catalog() -> Catalog:
    """Return a fresh copy of the two-year computer science program."""
    return Catalog(
        id="1",
        program_name="Open Source Computer Science School: Learn by Doing",
        years=[
            Year(
                id="y1",
                number=1,
                title="FOUNDATIONS & CORE PROGRAMMING",
                categories=[
                    Category(
                        id="cat1",
                        name="System Fundamentals",
                        courses=[
                            Course(
                                id="linux-fundamentals",
                                title="GNU/Linux Fundamentals",
                                description="File system hierarchy, permissions, users and groups.",
                                is_starting_node=True,
                            ),
                            Course(
                                id="command-line",
                                title="Command Line & Shell Scripting",
                                description="Pipes, redirection, process management and shell scripts.",
                                prerequisites=["linux-fundamentals"],
                            ),
                            Course(
                                id="git",
                                title="Version Control with Git",
                                description="Branching, merging and collaborative workflows.",
                                prerequisites=["command-line"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat2",
                        name="Programming Foundations",
                        courses=[
                            Course(
                                id="c-programming",
                                title="C Programming Essentials",
                                description="Types, control flow, pointers and manual memory management.",
                                prerequisites=["command-line"],
                            ),
                            Course(
                                id="data-structures",
                                title="Data Structures Implementation",
                                description="Lists, stacks, queues, trees and graphs in C.",
                                prerequisites=["c-programming", "discrete-math"],
                            ),
                            Course(
                                id="python",
                                title="Python Programming",
                                description="Syntax, modules, packages and object-oriented design.",
                                prerequisites=["c-programming"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat3",
                        name="Computer Systems",
                        courses=[
                            Course(
                                id="computer-architecture",
                                title="Computer Architecture",
                                description="CPU design, memory hierarchy and instruction sets.",
                                prerequisites=["c-programming"],
                            ),
                            Course(
                                id="operating-systems",
                                title="Operating Systems Concepts",
                                description="Processes, memory, file systems and POSIX.",
                                prerequisites=["computer-architecture", "c-programming"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat4",
                        name="Web Fundamentals",
                        courses=[
                            Course(
                                id="web-dev-basics",
                                title="Web Development Basics",
                                description="HTML, CSS and how the browser talks to servers.",
                                is_starting_node=True,
                            ),
                            Course(
                                id="javascript",
                                title="JavaScript Fundamentals",
                                description="Language core, the DOM and asynchronous code.",
                                prerequisites=["web-dev-basics", "python"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat5",
                        name="Mathematics & Algorithms",
                        courses=[
                            Course(
                                id="discrete-math",
                                title="Discrete Mathematics & Algorithms",
                                description="Logic, sets, combinatorics and algorithm analysis.",
                                prerequisites=["c-programming"],
                            ),
                        ],
                    ),
                ],
            ),
            Year(
                id="y2",
                number=2,
                title="ADVANCED TOPICS & APPLICATIONS",
                categories=[
                    Category(
                        id="cat6",
                        name="Software Engineering",
                        courses=[
                            Course(
                                id="software-dev-methodologies",
                                title="Software Development Methodologies",
                                description="Agile practice, testing and code review.",
                                prerequisites=["git", "python"],
                            ),
                            Course(
                                id="design-patterns",
                                title="Design Patterns & Architecture",
                                description="Common patterns and how to structure larger systems.",
                                prerequisites=["python", "data-structures"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat7",
                        name="Full-Stack Development",
                        courses=[
                            Course(
                                id="frontend",
                                title="Frontend Development",
                                description="Component frameworks, state and accessibility.",
                                prerequisites=["javascript", "web-dev-basics"],
                            ),
                            Course(
                                id="backend",
                                title="Backend Development",
                                description="HTTP services, APIs and deployment basics.",
                                prerequisites=["python", "javascript", "operating-systems"],
                            ),
                            Course(
                                id="database",
                                title="Database Systems",
                                description="Relational modelling, SQL and transactions.",
                                prerequisites=["data-structures", "python"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat8",
                        name="Systems & Networks",
                        courses=[
                            Course(
                                id="network-programming",
                                title="Network Programming",
                                description="Sockets, protocols and concurrent servers.",
                                prerequisites=["operating-systems", "python"],
                            ),
                            Course(
                                id="system-admin",
                                title="System Administration",
                                description="Services, monitoring and configuration management.",
                                prerequisites=["linux-fundamentals", "command-line", "network-programming"],
                            ),
                            Course(
                                id="security",
                                title="Security Fundamentals",
                                description="Threat models, cryptography basics and hardening.",
                                prerequisites=["operating-systems", "network-programming"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat9",
                        name="Advanced Applications",
                        courses=[
                            Course(
                                id="data-science",
                                title="Data Science with Python",
                                description="Data wrangling, statistics and visualization.",
                                prerequisites=["python", "discrete-math"],
                            ),
                            Course(
                                id="devops",
                                title="DevOps Practices",
                                description="CI/CD, containers and infrastructure as code.",
                                prerequisites=["system-admin", "git", "backend"],
                            ),
                        ],
                    ),
                    Category(
                        id="cat10",
                        name="Capstone",
                        courses=[
                            Course(
                                id="open-source",
                                title="Open Source Contribution",
                                description="Land a change in an existing open source project.",
                                prerequisites=["git", "software-dev-methodologies"],
                            ),
                            Course(
                                id="capstone-project",
                                title="Capstone Project",
                                description="Design, build and present a complete system.",
                                prerequisites=[
                                    "devops",
                                    "security",
                                    "data-science",
                                    "open-source",
                                    "design-patterns",
                                    "database",
                                    "frontend",
                                ],
                                is_final_node=True,
                            ),
                        ],
                    ),
                ],
            ),
        ],
    )
