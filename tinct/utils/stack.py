import os
import sys

# Directory of the tinct package, with a trailing separator
PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def external_stacklevel() -> int:
    """
    ``stacklevel`` for :func:`warnings.warn` pointing at the first caller
    outside the tinct package.

    Must be called from the function that issues the warning.
    """
    frame = sys._getframe(1)
    level = 1
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level
