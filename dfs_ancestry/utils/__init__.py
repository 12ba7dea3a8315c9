from .          import np_utils
from .          import script_utils
