__version__ = '0.1.0'

from . transform import Transform
from . utils.crypt import InvalidKey

__all__ = ['Transform', 'InvalidKey']
