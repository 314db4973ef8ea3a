"""treesize — show the largest files and folders of a directory tree."""

__version__ = "0.1.0"
