"""Exception classes for extranotes.

Provides standardized exceptions for error handling throughout extranotes.
The footnote transform itself never raises on string input; these are raised
only when a configuration is built explicitly with invalid values.
"""

from __future__ import annotations


class ExtranotesError(Exception):
    """Base exception for all extranotes errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(ExtranotesError):
    """Invalid footnote configuration value.
    
    Raised by FootnoteConfig when an option has the wrong type or would
    produce broken markup (e.g. a wrapper tag that is not an element name).
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.
        
        Args:
            option: Name of the offending option (e.g., "tag", "icon")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
