"""Top-level package for the MCQ Test Shuffler.

Provides subpackages:
- mcq_toolkit.core – immutable Question/Option models and JSON helpers
- mcq_toolkit.extractor – docx answer marking, conversion and segmentation
- mcq_toolkit.review – reviewer answer selection and the confirm gate
- mcq_toolkit.builder – shuffled variants, answer key and archive output
- mcq_toolkit.cli – command-line entry point
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("mcq_toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
