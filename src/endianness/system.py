# Copyright 2026 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

"""
Facts about the byte layout of the machine running the interpreter.
"""

import logging
from array import array
from struct import calcsize


logger = logging.getLogger(__name__)


def is_big_endian() -> bool:
    """
    Returns True if this machine stores multi-byte integers with the most
    significant byte first.

    Writes the integer 1 into a native ``int`` and looks at the first byte
    in memory: it is 0 on a big-endian machine and 1 on a little-endian one.
    """

    return array("i", [1]).tobytes()[0] == 0


def byte_order() -> str:
    """
    Returns ``"big"`` or ``"little"``, spelled the same way as
    ``sys.byteorder``.
    """

    return "little" if IS_LITTLE else "big"


IS_LITTLE = not is_big_endian()

BYTE_SIZE = calcsize("=b")
SHORT_SIZE = calcsize("=h")
INT_SIZE = calcsize("=i")
LONG_SIZE = calcsize("=q")
FLOAT_SIZE = calcsize("=f")
DOUBLE_SIZE = calcsize("=d")

# Widest scalar the converters accept
MAX_WIDTH = LONG_SIZE
SUPPORTED_WIDTHS = (BYTE_SIZE, SHORT_SIZE, INT_SIZE, LONG_SIZE)

logger.debug("Host byte order is %s-endian", byte_order())
