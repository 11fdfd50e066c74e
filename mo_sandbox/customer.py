# encoding: utf-8
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Contact: Kyle Lahnakoski (kyle@lahnakoski.com)
#
from mo_dots import Null

from mo_sandbox.utils import check_not_null, structural_hash


class Customer(object):
    """
    RECORD WITH AN IMMUTABLE id, AND MUTABLE name AND email
    EQUALITY, HASH AND STRING FORM ARE DERIVED FROM ALL THREE FIELDS
    """

    __slots__ = ["_id", "_name", "_email"]

    def __init__(self, id, name, email):
        check_not_null(name, "name")
        check_not_null(email, "email")
        self._id = id
        self._name = name
        self._email = email

    @property
    def id(self):
        return self._id

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = check_not_null(value, "name")

    @property
    def email(self):
        return self._email

    @email.setter
    def email(self, value):
        self._email = check_not_null(value, "email")

    def copy(self, id=Null, name=Null, email=Null):
        """
        :return: NEW Customer, WITH THE GIVEN FIELDS REPLACED
        """
        if id is Null:
            id = self._id
        if name is Null:
            name = self._name
        if email is Null:
            email = self._email
        return Customer(id, name, email)

    def __iter__(self):
        # id, name, email = customer
        yield self._id
        yield self._name
        yield self._email

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Customer):
            return False
        return self._id == other._id and self._name == other._name and self._email == other._email

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return structural_hash(self._id, self._name, self._email)

    def __str__(self):
        return f"Customer(id={self._id}, name={self._name}, email={self._email})"

    def __repr__(self):
        return self.__str__()
