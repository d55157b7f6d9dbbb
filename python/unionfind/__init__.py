###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Array-backed disjoint-set (union-find) with union-by-size and path compression."""

from unionfind._errors import (DisjointSetError, IndexOutOfRangeError,
                               InvalidArgumentError)
from unionfind.disjointset import DisjointSet

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = (
    "DisjointSet",
    "DisjointSetError",
    "InvalidArgumentError",
    "IndexOutOfRangeError"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__
