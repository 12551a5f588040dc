from .clients import JudgeClient
from .document import ActiveDocument, ProblemViewer
from .extension import BaekjoonExplorer, activate
from .tree import ProblemTree

__all__ = [
    "ActiveDocument",
    "BaekjoonExplorer",
    "JudgeClient",
    "ProblemTree",
    "ProblemViewer",
    "activate",
]
