"""API request/response models."""

from whitepaper_server.models.api.system import *
from whitepaper_server.models.api.tools import *
