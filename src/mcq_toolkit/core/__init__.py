"""
MCQ Toolkit Core Package

Shared data models and utilities used by the extractor, review and builder
packages.

1. **Immutable Data Models**
   - Frozen dataclasses, new instances created for any change

2. **Calculated Answer State (Never Stored)**
   - `has_detected_answer` always calculated from the options

3. **Stable Identity**
   - Question/Option ids are assigned once during segmentation and used to
     correlate a question across every generated variant
"""

from .models import Option, Question

__all__ = [
    "Option",
    "Question",
]
