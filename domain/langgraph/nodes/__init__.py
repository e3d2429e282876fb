from .version_loader_node import version_loader_node
from .trigger_resolver_node import trigger_resolver_node
from .commit_loader_node import commit_loader_node
from .section_reader_node import section_reader_node
from .narrative_generator_node import narrative_generator_node
from .changelog_merger_node import changelog_merger_node
from .changelog_publisher_node import changelog_publisher_node

__all__ = [
    "version_loader_node",
    "trigger_resolver_node",
    "commit_loader_node",
    "section_reader_node",
    "narrative_generator_node",
    "changelog_merger_node",
    "changelog_publisher_node",
]
