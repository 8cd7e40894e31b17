"""
Service Tracker - Data Access Services
Version: 1.0.0

Changelog:
v1.0.0 (2026-07-14): Initial data access modules, one function per operation
"""

from . import clock
from . import customers
from . import service_calls
from . import repairs
from . import amc
from . import reference
from . import settings_store
from . import users
from . import stats
from . import maintenance
