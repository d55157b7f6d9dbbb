###########################################################################
###########################################################################
## A disjoint-set data structure and union-find algorithm.               ##
##                                                                       ##
## Copyright (C)  2022  Oliver Michael Kamperis                          ##
## Email: o.m.kamperis@gmail.com                                         ##
##                                                                       ##
## This program is free software: you can redistribute it and/or modify  ##
## it under the terms of the GNU General Public License as published by  ##
## the Free Software Foundation, either version 3 of the License, or     ##
## any later version.                                                    ##
##                                                                       ##
## This program is distributed in the hope that it will be useful,       ##
## but WITHOUT ANY WARRANTY; without even the implied warranty of        ##
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the          ##
## GNU General Public License for more details.                          ##
##                                                                       ##
## You should have received a copy of the GNU General Public License     ##
## along with this program. If not, see <https://www.gnu.org/licenses/>. ##
###########################################################################
###########################################################################

"""Module containing an array-backed disjoint-set data structure."""

import logging
import operator
from typing import Iterable, SupportsIndex

import numpy as np

from unionfind._errors import IndexOutOfRangeError, InvalidArgumentError

__copyright__ = "Copyright (C) 2022 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "DisjointSet",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


class DisjointSet:
    """
    A disjoint-set data structure, also called union-find, over a fixed
    universe of integer elements.

    A disjoint-set partitions its elements into disjoint sub-sets, such that
    every element is part of one, and only one, sub-set. The elements of
    this disjoint-set are the integers in the range `[0, size)`, and are
    all created (as unit sub-sets) when the disjoint-set is constructed.
    Elements can never be removed and sub-sets can never be split, the only
    mutating operation is unioning (merging) two sub-sets together.

    Each sub-set is a tree, stored implicitly in an array of parent
    pointers indexed by element, whose root (the element that is its own
    parent) is the unique representative of the sub-set. A second array
    holds the weight (number of elements) of each tree, which is only
    meaningful at roots. Two heuristics keep the trees shallow;
    - union-by-size, the root of the lighter tree is always attached
      under the root of the heavier tree,
    - and full path compression, every element visited whilst finding a
      root is re-pointed directly at that root,

    which together make root finding (and therefore unioning) effectively
    constant amortised time.

    Note that finding a root is not a pure query. Because of path
    compression, `find`, `connected`, `component_size` and `unify` all
    modify the parent array, even though `find` only changes the shape of
    the trees and never the partition itself. Use `find_root` with
    `compress=False` to find a root without modifying anything. The
    disjoint-set is not thread-safe, callers must serialise all access.

    Example Usage
    -------------
    ```
    from unionfind import DisjointSet

    # Construct a disjoint-set with five elements, it is initially
    # fully-disjoint, such that no two elements are in the same sub-set.
    dset = DisjointSet(5)

    >>> str(dset)
    'Disjoint-Set: total elements = 5, total disjoint sub-sets = 5'

    # Union the sub-sets containing the given elements.
    >>> dset.unify(0, 1)
    >>> dset.unify(1, 2)
    >>> dset.connected(0, 2)
    True
    >>> dset.component_size(0)
    3
    >>> dset.number_of_components
    3
    ```
    """

    __DISJOINT_SET_LOGGER = logging.getLogger("DisjointSet")

    __slots__ = (
        "__size",
        "__parent_of",
        "__weight_of",
        "__components",
        "__debug"
    )

    def __init__(
        self,
        size: SupportsIndex, /, *,
        debug: bool = False
    ) -> None:
        """
        Create a new fully-disjoint disjoint-set of the given size.

        Parameters
        ----------
        `size: int` - The number of elements in the disjoint-set, the
        elements are the integers in the range `[0, size)`.

        `debug: bool = False` - Whether to log union operations to the
        `DisjointSet` logger at debug level.

        Raises
        ------
        `InvalidArgumentError` - If the size is less than one.
        """
        size = operator.index(size)
        if size <= 0:
            raise InvalidArgumentError("size<=0 is not allowed.")

        self.__debug: bool = debug
        if self.__debug:
            self.__DISJOINT_SET_LOGGER.debug(
                "Creating new disjoint-set with: size=%s", size
            )

        self.__size: int = size
        # Maps: element -> parent element, roots are their own parent.
        self.__parent_of: np.ndarray = np.arange(size, dtype=np.intp)
        # Maps: root -> number of elements in its tree.
        self.__weight_of: np.ndarray = np.ones(size, dtype=np.intp)
        self.__components: int = size

    def __str__(self) -> str:
        """
        Return string summary representation describing number of elements and
        disjoint sub-sets.
        """
        return (f"Disjoint-Set: total elements = {self.__size}, "
                f"total disjoint sub-sets = {self.__components}")

    def __repr__(self) -> str:
        """Return a string representation of the disjoint-set."""
        return (f"{self.__class__.__name__}(size={self.__size}, "
                f"components={self.__components})")

    def __contains__(self, element: object) -> bool:
        """Whether an element is in the disjoint-set."""
        try:
            index = operator.index(element)  # type: ignore[arg-type]
        except TypeError:
            return False
        return 0 <= index < self.__size

    def __len__(self) -> int:
        """Get the number of elements in the disjoint-set."""
        return self.__size

    @property
    def size(self) -> int:
        """Get the number of elements in the disjoint-set."""
        return self.__size

    @property
    def number_of_components(self) -> int:
        """Get the number of disjoint sub-sets remaining."""
        return self.__components

    @property
    def parents(self) -> np.ndarray:
        """Get a read-only view of the element to parent array."""
        view = self.__parent_of.view()
        view.flags.writeable = False
        return view

    @property
    def weights(self) -> np.ndarray:
        """
        Get a read-only view of the element to weight array.

        Only the entries of roots are meaningful.
        """
        view = self.__weight_of.view()
        view.flags.writeable = False
        return view

    @property
    def roots(self) -> np.ndarray:
        """Get the roots of all disjoint sub-sets in ascending order."""
        return np.flatnonzero(
            self.__parent_of == np.arange(self.__size, dtype=np.intp)
        )

    def __validate(self, element: SupportsIndex) -> int:
        """Check that an element is in the range `[0, size)`."""
        index = operator.index(element)
        if not 0 <= index < self.__size:
            raise IndexOutOfRangeError(
                f"The element {element!r} is not in the range "
                f"[0, {self.__size}) of the disjoint-set {self!s}."
            )
        return index

    def find(self, element: SupportsIndex, /) -> int:
        """
        Find the root of the sub-set containing the given element, fully
        compressing the path from the element to its root.

        This modifies the disjoint-set, see `find_root`.

        Raises
        ------
        `IndexOutOfRangeError` - If the element is not in the disjoint-set.
        """
        return self.__find_root(self.__validate(element), True)

    def find_root(
        self,
        element: SupportsIndex, /,
        compress: bool = True
    ) -> int:
        """
        Find the root of the sub-set containing the given element.

        A root, is a set element, whose parent is itself.

        This method finds roots via an iterative search, and if
        compression is enabled, iteratively compresses the path
        from the given element to the root, such that the parents
        of all non-root elements on the path, will be the root.

        Parameters
        ----------
        `element: int` - The element whose root to find.

        `compress: bool = True` - Whether to fully compress the path
        from the given node to its root. This modifies the parent array
        but never the partition, the weights, or the number of sub-sets.
        If False, the disjoint-set is not modified at all.

        Returns
        -------
        `int` - The root of the sub-set containing the given element.

        Raises
        ------
        `IndexOutOfRangeError` - If the element is not in the disjoint-set.
        """
        return self.__find_root(self.__validate(element), compress)

    def __find_root(self, element: int, compress: bool) -> int:
        # To find the root of the sub-set containing the given element,
        # simply iterate up the element's tree until a root is found.
        parent_of: np.ndarray = self.__parent_of
        root: int = element
        while (parent := int(parent_of[root])) != root:
            root = parent

        # Compression performed by a seperate loop,
        # achieves maximum possible level of compression.
        if compress:
            while (parent := int(parent_of[element])) != root:
                parent_of[element] = root
                element = parent

        return root

    def find_path(self, element: SupportsIndex, /) -> list[int]:
        """
        Find the current path from the given element to the root element of
        its disjoint sub-set, without compressing it.

        Returns
        -------
        `list[int]` - A list of elements on the path from the given element,
        to the root element of its disjoint sub-set. The list will contain
        only the given element if and only if the given element is the root
        of its own sub-set.

        Raises
        ------
        `IndexOutOfRangeError` - If the element is not in the disjoint-set.
        """
        element = self.__validate(element)
        path: list[int] = [element]
        parent_of: np.ndarray = self.__parent_of
        while (parent := int(parent_of[element])) != element:
            path.append(parent)
            element = parent
        return path

    def connected(
        self,
        element_1: SupportsIndex,
        element_2: SupportsIndex, /
    ) -> bool:
        """
        Determine whether the two elements are in the same disjoint sub-set.

        Equivalent to `self.find(element_1) == self.find(element_2)`.
        """
        index_1 = self.__validate(element_1)
        index_2 = self.__validate(element_2)
        return self.__find_root(index_1, True) == self.__find_root(index_2, True)

    def is_connected(
        self,
        element_1: SupportsIndex, /,
        *elements: SupportsIndex
    ) -> bool:
        """
        Determine whether all the given elements are in the same disjoint
        sub-set.

        Equivalent to:
            `all(self.find(element_1) == self.find(other)
             for other in elements)`.
        """
        index_1 = self.__validate(element_1)
        indices = [self.__validate(element) for element in elements]
        root_1: int = self.__find_root(index_1, True)
        return all(
            root_1 == self.__find_root(index, True)
            for index in indices
        )

    def component_size(self, element: SupportsIndex, /) -> int:
        """Get the number of elements in the sub-set containing the element."""
        root = self.__find_root(self.__validate(element), True)
        return int(self.__weight_of[root])

    def unify(
        self,
        element_1: SupportsIndex,
        element_2: SupportsIndex, /
    ) -> None:
        """
        Union the sub-sets containing the given elements together,
        using the union-by-size algorithm.

        The root of the lighter sub-set is attached under the root of the
        heavier sub-set. If both sub-sets have the same weight, the sub-set
        containing the first element is attached under the root of the
        sub-set containing the second element. If the elements are already
        in the same sub-set, nothing changes.

        Raises
        ------
        `IndexOutOfRangeError` - If either element is not in the
        disjoint-set.
        """
        index_1 = self.__validate(element_1)
        index_2 = self.__validate(element_2)
        self.__union(index_1, index_2)

    def union_many(self, elements: Iterable[SupportsIndex], /) -> int:
        """
        Union all elements in the given iterable of elements and return the
        root of the resulting sub-set.

        All elements are checked before any sub-sets are unioned.

        Raises
        ------
        `ValueError` - If the iterable is empty.

        `IndexOutOfRangeError` - If any element is not in the disjoint-set.
        """
        indices = [self.__validate(element) for element in elements]
        if not indices:
            raise ValueError("Cannot union an empty iterable of elements.")
        first, *others = indices
        root: int = self.__find_root(first, True)
        for index in others:
            root = self.__union(first, index)
        return root

    def __union(self, element_1: int, element_2: int) -> int:
        """Union the sub-sets of two valid elements, returning the new root."""
        root_1 = self.__find_root(element_1, True)
        root_2 = self.__find_root(element_2, True)
        if root_1 == root_2:
            if self.__debug:
                self.__DISJOINT_SET_LOGGER.debug(
                    "Elements %s and %s are already connected with root %s.",
                    element_1, element_2, root_1
                )
            return root_1

        # Union by size - root_1 always ends up as the lighter root,
        # on equal weights root_1 is attached under root_2.
        weight_of: np.ndarray = self.__weight_of
        if weight_of[root_1] > weight_of[root_2]:
            root_1, root_2 = root_2, root_1
        self.__parent_of[root_1] = root_2
        weight_of[root_2] += weight_of[root_1]
        self.__components -= 1

        if self.__debug:
            self.__DISJOINT_SET_LOGGER.debug(
                "Attached root %s under root %s: weight=%s, components=%s",
                root_1, root_2, int(weight_of[root_2]), self.__components
            )
        return root_2
