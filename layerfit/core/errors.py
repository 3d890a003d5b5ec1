"""Error taxonomy for the fit-layer-to-canvas operation.

Every error carries a message meant to be shown to the user as-is.  All of
them except :class:`TransformApplicationError` are raised before the scene is
touched.
"""


class FitError(Exception):
    """Base class for every failure of a fit operation."""

    default_message = "The layer could not be fitted to the canvas."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class NoActiveContextError(FitError):
    default_message = "No document is open."


class NoSelectionError(FitError):
    default_message = "No object is selected."


class UnresolvableContainerError(FitError):
    default_message = "Failed to retrieve the layer of the selected item."


class ContainerNotEditableError(FitError):
    default_message = "The layer is hidden or locked. Please unlock and make it visible."


class EmptyInputError(FitError):
    default_message = "There are no objects in the layer."


class DegenerateGeometryError(FitError):
    default_message = "The size of the selected object is invalid."


class TransformApplicationError(FitError):
    """A host-level group/translate/scale/ungroup step failed midway."""

    default_message = "An error occurred while transforming the layer."
