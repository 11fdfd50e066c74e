# encoding: utf-8
#
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this file,
# You can obtain one at http://mozilla.org/MPL/2.0/.
#
# Author: Kyle Lahnakoski (kyle@lahnakoski.com)
#

import unittest

from mo_sandbox import Singleton, DEFAULT_TITLE
from mo_sandbox import singleton


class TestSingleton(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.backup = Singleton.instance().title

    def tearDown(self):
        Singleton.instance().title = TestSingleton.backup

    def test_initial_title(self):
        self.assertEqual(DEFAULT_TITLE, "global object")
        self.assertEqual(TestSingleton.backup, "global object")

    def test_same_identity(self):
        self.assertIs(Singleton.instance(), Singleton.instance())
        self.assertIs(Singleton.instance(), singleton.INSTANCE)

    def test_set_title(self):
        Singleton.instance().title = "x"
        self.assertEqual(Singleton.instance().title, "x")

    def test_shared_between_readers(self):
        writer = Singleton.instance()
        reader = singleton.INSTANCE
        writer.title = "shared"
        self.assertEqual(reader.title, "shared")

    def test_null_title(self):
        def set_title():
            Singleton.instance().title = None

        self.assertRaises(Exception, set_title)
        self.assertEqual(Singleton.instance().title, TestSingleton.backup)

    def test_no_second_instance(self):
        self.assertRaises(Exception, Singleton)
        self.assertIs(Singleton.instance(), singleton.INSTANCE)

    def test_string(self):
        self.assertEqual(str(Singleton.instance()), "Singleton(title=global object)")
