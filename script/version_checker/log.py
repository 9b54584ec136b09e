#!/usr/bin/env python3
# -*- coding:utf-8 -*-
#############################################################################
# Copyright (c) 2023 Huawei Technologies Co.,Ltd.
#
# openGauss is licensed under Mulan PSL v2.
# You can use this software according to the terms
# and conditions of the Mulan PSL v2.
# You may obtain a copy of Mulan PSL v2 at:
#
#          http://license.coscl.org.cn/MulanPSL2
#
# THIS SOFTWARE IS PROVIDED ON AN "AS IS" BASIS,
# WITHOUT WARRANTIES OF ANY KIND,
# EITHER EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO NON-INFRINGEMENT,
# MERCHANTABILITY OR FIT FOR A PARTICULAR PURPOSE.
# See the Mulan PSL v2 for more details.
# ----------------------------------------------------------------------------
# Description  : gp_versionchk is a utility to check whether a cluster
#                upgrade between two installed versions is supported.
#############################################################################
"""
Log module
"""


import time
import sys
from enum import Enum
from version_checker.utils.exception import LogFileException
from version_checker.utils.singleton import singleton


class LogLevel(Enum):
    DEBUG = 0     # log file only, when debug is on
    LOG = 1       # log file only
    INFO = 2      # log file and screen
    WARNING = 3   # log file and screen
    ERROR = 4     # log file and screen


@singleton
class Logger(object):

    def __init__(self):
        self._file = None
        self._file_path = None
        self._debug = False

    def __del__(self):
        self.close()

    def set_file(self, file_path):
        self.close()
        try:
            self._file = open(file_path, 'a')
        except OSError as e:
            raise LogFileException(file_path, e) from e
        self._file_path = file_path

        self.log('Logger file set to: %s.' % file_path)

    def close(self):
        sys.stdout.flush()
        if self._file is not None:
            self._file.close()
            self._file = None
            self._file_path = None

    def set_debug(self, state):
        self._debug = state

    @staticmethod
    def _format_content(log_level, content, hint):
        """
        Build one log record with time and level.
        :param log_level: level
        :param content: content
        :param hint: hint, may be None
        :return:
        """
        s = time.strftime("%Y-%m-%d-%H_%M_%S", time.localtime()) + \
            " [{0}] ".format(log_level.name) + \
            content + \
            (("\n HINT: " + hint) if hint is not None else "") + \
            '\n'
        return s

    def _write_log(self, log_content):
        if self._file is None:
            return
        self._file.write(log_content)
        self._file.flush()

    @staticmethod
    def _print_log(log_content):
        print(log_content, end='')

    def debug(self, content, hint=None):
        if not self._debug:
            return
        res = self._format_content(LogLevel.DEBUG, content, hint)
        self._write_log(res)

    def log(self, content, hint=None):
        res = self._format_content(LogLevel.LOG, content, hint)
        self._write_log(res)

    def info(self, content, hint=None):
        res = self._format_content(LogLevel.INFO, content, hint)
        self._write_log(res)
        self._print_log(res)

    def warning(self, content, hint=None):
        res = self._format_content(LogLevel.WARNING, content, hint)
        self._write_log(res)
        self._print_log(res)

    def error(self, content, hint=None):
        """
        Error message, written to the log file and the screen. The caller decides how to stop.
        :param content: content
        :param hint: hint for the operator
        :return:
        """
        res = self._format_content(LogLevel.ERROR, content, hint)
        self._write_log(res)
        self._print_log(res)


# one logger for the whole process
logger = Logger()
