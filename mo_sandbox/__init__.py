# encoding: utf-8
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Contact: Kyle Lahnakoski (kyle@lahnakoski.com)
#
from mo_sandbox.customer import Customer
from mo_sandbox.ranges import IntProgression, IntRange, closed_range, down_to
from mo_sandbox.singleton import Singleton, DEFAULT_TITLE
from mo_sandbox.utils import NULL_ARGUMENT, check_not_null, structural_hash
