"""
Skill Tree - curriculum dependency graph and progression engine.

Turns a year/category/course catalog into a leveled prerequisite DAG and
derives per-user unlock/completion state from a set of completed courses.
"""

__version__ = "1.0.0"
