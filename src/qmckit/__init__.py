from .version import __version__ as __version__

__title__ = "QMCKit"
__description__ = "Segment-aware decryption engine for QMC2 RC4 obfuscated audio."
__author__ = "Saudade Z"
__license__ = "Apache-2.0"
