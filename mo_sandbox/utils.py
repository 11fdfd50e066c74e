# encoding: utf-8
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Contact: Kyle Lahnakoski (kyle@lahnakoski.com)
#
from mo_imports import delay_import

logger = delay_import("mo_logs.logger")

HASH_MULTIPLIER = 31
NULL_ARGUMENT = "Expecting {{name}} to not be null"


def check_not_null(value, name):
    """
    RAISE IF value IS None (OR Null)
    :param value: THE ARGUMENT TO CHECK
    :param name: NAME OF THE ARGUMENT, FOR THE ERROR MESSAGE
    :return: value
    """
    if value == None:
        logger.error(NULL_ARGUMENT, name=name)
    return value


def structural_hash(*values):
    """
    COMBINE THE HASHES OF values, IN ORDER
    h = (...(hash(v0) * 31 + hash(v1)) * 31 + ...) + hash(vn)
    """
    output = 0
    for v in values:
        output = output * HASH_MULTIPLIER + hash(v)
    return output
