"""Show the leveled prerequisite graph for a catalog."""
import sys

from skilltree.config import get_settings
from skilltree.engines.graph.queries import get_nodes_by_level
from skilltree.logging_config import configure_logging
from skilltree.pedagogy.curriculum_engine import CurriculumEngine, load_catalog

settings = get_settings()
configure_logging(log_level=settings.log_level, environment=settings.environment, debug=settings.debug)

if len(sys.argv) > 1:
    engine = CurriculumEngine(load_catalog(sys.argv[1]))
else:
    engine = CurriculumEngine.from_settings(settings)

graph = engine.graph
print(f"=== {engine.catalog.program_name or '(unnamed program)'} ===")
print(f"{len(graph.nodes)} courses, {len(graph.links)} links, max level {graph.max_level}\n")

for level, nodes in get_nodes_by_level(graph).items():
    print(f"Level {level}:")
    for node in nodes:
        flags = []
        if node.is_starting_node:
            flags.append("start")
        if node.is_final_node:
            flags.append("final")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        prereqs = ", ".join(node.prerequisites) or "-"
        print(f"  {node.id:<28} {node.name}{suffix}")
        print(f"  {'':<28} requires: {prereqs}")
