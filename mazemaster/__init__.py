"""mazemaster: a multi-client ASCII maze game served over TCP."""
# pylint: disable=wildcard-import,undefined-variable
from .maze import *             # noqa
from .viewport import *         # noqa
from .command import *          # noqa
from .session import *          # noqa
from .server import *           # noqa
from .accessories import get_version as __get_version

__all__ = (
    maze.__all__ +
    viewport.__all__ +
    command.__all__ +
    session.__all__ +
    server.__all__
)  # noqa

__license__ = 'ISC'
__version__ = __get_version()
