# encoding: utf-8
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Contact: Kyle Lahnakoski (kyle@lahnakoski.com)
#
from mo_future import integer_types
from mo_logs import logger

from mo_sandbox.utils import structural_hash


def closed_range(first, last):
    """
    ALL INTEGERS FROM first TO last, INCLUSIVE
    closed_range(1, 5) == 1..5
    """
    return IntRange(first, last)


def down_to(first, last):
    """
    ALL INTEGERS FROM first DOWN TO last, INCLUSIVE
    """
    return IntProgression(first, last, -1)


def _last_element(first, last, step):
    # THE LAST VALUE REACHED STEPPING FROM first, NOT PAST last
    if step > 0:
        if first >= last:
            return last
        return last - (last - first) % step
    else:
        if first <= last:
            return last
        return last + (first - last) % -step


def _check_int(value, name):
    if not isinstance(value, integer_types):
        logger.error(
            "Expecting {{name}} to be an integer, not {{type}}", name=name, type=value.__class__.__name__,
        )


class IntProgression(object):
    """
    ARITHMETIC SEQUENCE OF INTEGERS, DEFINED BY first, last AND step
    last IS NORMALIZED TO THE FINAL ELEMENT ACTUALLY REACHED
    """

    __slots__ = ["first", "last", "step"]

    def __init__(self, first, last, step):
        _check_int(first, "first")
        _check_int(last, "last")
        _check_int(step, "step")
        if step == 0:
            logger.error("Step must be non-zero")
        self.first = first
        self.last = _last_element(first, last, step)
        self.step = step

    @property
    def is_empty(self):
        if self.step > 0:
            return self.first > self.last
        return self.first < self.last

    def step_by(self, step):
        """
        :param step: POSITIVE STEP SIZE; DIRECTION IS KEPT
        :return: NEW IntProgression OVER THE SAME BOUNDS
        """
        _check_int(step, "step")
        if step <= 0:
            logger.error("Step must be positive, was: {{step}}", step=step)
        return IntProgression(self.first, self.last, step if self.step > 0 else -step)

    def reversed(self):
        return IntProgression(self.last, self.first, -self.step)

    def __reversed__(self):
        return iter(self.reversed())

    def __iter__(self):
        if self.is_empty:
            return
        v = self.first
        while True:
            yield v
            if v == self.last:
                return
            v += self.step

    def __len__(self):
        if self.is_empty:
            return 0
        return (self.last - self.first) // self.step + 1

    def __contains__(self, value):
        if self.is_empty or not isinstance(value, integer_types):
            return False
        if self.step > 0:
            if not (self.first <= value <= self.last):
                return False
        elif not (self.last <= value <= self.first):
            return False
        return (value - self.first) % self.step == 0

    def __eq__(self, other):
        if not isinstance(other, IntProgression):
            return False
        if self.is_empty and other.is_empty:
            return True
        return self.first == other.first and self.last == other.last and self.step == other.step

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        if self.is_empty:
            return -1
        return structural_hash(self.first, self.last, self.step)

    def __str__(self):
        if self.step > 0:
            return f"{self.first}..{self.last} step {self.step}"
        return f"{self.first} downTo {self.last} step {-self.step}"

    def __repr__(self):
        return self.__str__()


class IntRange(IntProgression):
    """
    IntProgression WITH step == 1
    """

    __slots__ = []

    def __init__(self, first, last):
        IntProgression.__init__(self, first, last, 1)

    def __str__(self):
        return f"{self.first}..{self.last}"
