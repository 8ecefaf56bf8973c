"""Sweep local Git branches already merged into a reference branch.

Features:
- List branches merged into the current (or a given) branch
- Protect branches with patterns from `git config broom.protectedBranches`
- Delete all, selected or none of the merged branches interactively
- Dry run mode to only list what would be cleaned
"""

import os

# Let a missing git executable surface from check_git() instead of failing `import git`
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

__version__ = "0.3.0"
