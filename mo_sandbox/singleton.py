# encoding: utf-8
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Contact: Kyle Lahnakoski (kyle@lahnakoski.com)
#
from mo_logs import logger

from mo_sandbox.utils import check_not_null

DEFAULT_TITLE = "global object"
INSTANCE = None  # SET ONCE, AT IMPORT


class Singleton(object):
    """
    THE ONE PROCESS-WIDE HOLDER OF title
    NOT THREAD SAFE: CONCURRENT WRITERS RACE, LAST WRITE WINS
    """

    __slots__ = ["_title"]

    def __new__(cls):
        if INSTANCE is not None:
            logger.error("Singleton already exists, use Singleton.instance()")
        return object.__new__(cls)

    def __init__(self):
        self._title = DEFAULT_TITLE

    @classmethod
    def instance(cls):
        return INSTANCE

    @property
    def title(self):
        return self._title

    @title.setter
    def title(self, value):
        self._title = check_not_null(value, "title")

    def __str__(self):
        return f"Singleton(title={self._title})"

    def __repr__(self):
        return self.__str__()


INSTANCE = Singleton()
