"""
Call-site capture for error stamping.

Stands in for compile-time file/line intrinsics: the location of a failure is
read from the interpreter frame that returns it.
"""

import os
import sys

from feedback.models.error import SourceLocation


def capture_location(stacklevel: int = 1, full_path: bool = False) -> SourceLocation:
    """
    Capture the source location of a frame on the current call stack.
    
    Args:
        stacklevel: 1 for the function calling capture_location, 2 for its
            caller, and so on
        full_path: Keep the directory part of the file name
        
    Returns:
        SourceLocation of the requested frame
        
    Raises:
        ValueError: If stacklevel is less than 1 or deeper than the stack
    """
    if stacklevel < 1:
        raise ValueError(f"stacklevel must be at least 1, got {stacklevel}")
    
    frame = sys._getframe(stacklevel)
    filename = frame.f_code.co_filename
    if not full_path:
        filename = os.path.basename(filename)
    
    return SourceLocation(
        file=filename,
        line=frame.f_lineno,
        function=frame.f_code.co_name
    )
