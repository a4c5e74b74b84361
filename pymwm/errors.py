"""
Exceptions raised when fitting or sampling a multifractal wavelet model.
"""


class MWMError(ValueError):
    """
    Base class of the errors raised by pymwm.

    Subclasses ``ValueError`` so that callers catching invalid inputs the
    usual way keep working.
    """


class InvalidConfiguration(MWMError):
    """
    The requested number of blocks or scales, or the input itself, is not
    usable.
    """


class InsufficientData(MWMError):
    """
    The series is too short for the requested block/scale combination.
    """


class ModelMismatch(MWMError):
    """
    The model is not appropriate for the data.
    """
