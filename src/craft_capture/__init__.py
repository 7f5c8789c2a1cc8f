"""craft-capture — quick capture of text into Craft documents.

Posts text from arguments or a pipe to the Craft blocks API with a
strict layered architecture.
"""

from craft_capture.version import __version__

__all__: list[str] = ["__version__"]
