# pylint: disable=C0114

from ._version import __version__  # noqa: F401

from .mwm import fit, fit_with_scales  # noqa: F401
from .model import MWM  # noqa: F401
from .simul import sample  # noqa: F401
from .wavelet import wavelet_analysis  # noqa: F401
from .errors import (MWMError, InvalidConfiguration,  # noqa: F401
                     InsufficientData, ModelMismatch)
