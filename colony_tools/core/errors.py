"""
Exceptions raised while converting raw game data.

Every failure derives from ConversionError. All of them abort the run
except UnsupportedToolsetError, which the craftable converter catches by
type to skip the single recipe that raised it.
"""


class ConversionError(Exception):
    pass


class MalformedNameError(ConversionError):
    pass


class UnsupportedToolsetError(ConversionError):
    """A creator's toolset contains a tool outside the supported tiers."""

    def __init__(self, tool):
        super().__init__(f"Toolset contains invalid tool: {tool}")
        self.tool = tool


class UnknownToolsetError(ConversionError):
    pass


class MissingPrimaryOutputError(ConversionError):
    pass


class MultiplePrimaryOutputsError(ConversionError):
    pass


class UnknownItemError(ConversionError):
    def __init__(self, item_id, kind="item"):
        super().__init__(f"User friendly name unavailable for {kind}: {item_id}")
        self.item_id = item_id


class UnknownCreatorError(ConversionError):
    def __init__(self, creator_id, message=None):
        super().__init__(message or f"User friendly name unavailable for creator: {creator_id}")
        self.creator_id = creator_id


class UnknownGrowableOutputError(ConversionError):
    pass


class InvalidGrowableError(ConversionError):
    pass


class DuplicateItemError(ConversionError):
    def __init__(self, message, name, creator):
        super().__init__(message)
        self.name = name
        self.creator = creator


class MissingFileError(ConversionError):
    pass


class MultipleFilesError(ConversionError):
    pass


class InvalidDirectoryError(ConversionError, NotADirectoryError):
    pass


class InvalidFileError(ConversionError):
    pass


class LocaleError(ConversionError):
    pass
