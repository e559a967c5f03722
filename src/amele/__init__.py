""" Python implementation of the amele guest protocol. A guest function
    receives an envelope of inputs and context from its host process, may
    call back into the host synchronously, and finally hands an updated
    context back, over either a TCP connection or a pair of files.
"""

# Utility components.

from . import errors
from . import values
from .errors import *

# Submodules used by multiple other components.

from . import config
from . import protocol
from . import transport

# Primary public-facing interfaces.

from .transport import Session

from . import begin
accept = begin.accept
context = begin.context
call_function = begin.call_function
respond = begin.respond

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
