"""Read-only virtual filesystem synthesized from portfolio content."""

from portfolio_mcp.vfs.builder import build_tree
from portfolio_mcp.vfs.formatter import SECTION_NAMES, SectionFormatter
from portfolio_mcp.vfs.nodes import DirectoryNode, FileNode, Node, NodeKind

__all__ = [
    "build_tree",
    "DirectoryNode",
    "FileNode",
    "Node",
    "NodeKind",
    "SectionFormatter",
    "SECTION_NAMES",
]
