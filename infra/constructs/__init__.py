from .api import Api as Api
from .functions import Functions as Functions
from .layers import Layers as Layers
