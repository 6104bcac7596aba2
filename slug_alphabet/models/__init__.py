from .alphabet import *
from .error import *
