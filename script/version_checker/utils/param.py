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
Param module
"""

import os
from getopt import getopt, GetoptError
from enum import Enum
from version_checker.utils.exception import ParamParseException
from version_checker.utils.version import VERSION_CHECKER_VERSION


class Action(Enum):
    """
    Action to run
    """
    HELP = 0
    CHECK = 1
    SHOW = 2


class Option(object):
    def __init__(self, value, shortopt, longopt, assign_func=None):
        """
        One option
        :param value: default value
        :param shortopt: short form for getopt
        :param longopt: long form for getopt
        :param assign_func: check and convert function for a new value
        :return:
        """
        self.value = value
        self.shortopt = shortopt
        self.longopt = longopt
        self.assign_func = assign_func

    def assign(self, value):
        self.value = value if self.assign_func is None else self.assign_func(value)


class Param(object):
    helper = """
    gp_versionchk %s

    Usage:
        gp_versionchk [action [params, ...] ]

    ACTION:
        check | verify      check that the upgrade from source to target is supported
        show                print the version of an installation
        help | -h | -?      print this message

    params:
        -s | --source-home     root of the source installation
        -t | --target-home     root of the target installation
        -S | --source-version  source version as 'Type Version', e.g. 'Greenplum 6.26.0'
        -T | --target-version  target version as 'Type Version'
        -g | --gphome          installation to show, for action show
        -l | --log-file        append the log to this file
        -d | --debug           debug mode, log more.
    """ % VERSION_CHECKER_VERSION

    def __init__(self, argv):
        self._opt_info = ['', []]   # shortopts, longopts
        self._opt_dict = {}

        self.action = Action.HELP
        self.error = None

        self.source_home = self._register(None, 's:', 'source-home=', Param.assign_path)
        self.target_home = self._register(None, 't:', 'target-home=', Param.assign_path)
        self.source_version = self._register(None, 'S:', 'source-version=')
        self.target_version = self._register(None, 'T:', 'target-version=')
        self.gphome = self._register(None, 'g:', 'gphome=', Param.assign_path)
        self.log_file = self._register(None, 'l:', 'log-file=', Param.assign_path)
        self.debug = self._register(False, 'd', 'debug', Param.assign_debug)

        try:
            self._parse(argv[1:])
            self._check()
        except ParamParseException as e:
            self.action = Action.HELP
            self.error = e

    def __str__(self):
        return 'Param as: ' + str({
            'action': self.action,
            'source_home': self.source_home.value,
            'target_home': self.target_home.value,
            'source_version': self.source_version.value,
            'target_version': self.target_version.value,
            'gphome': self.gphome.value,
            'log_file': self.log_file.value,
            'debug': self.debug.value
        }) + '\n'

    def _register(self, value, shortopt, longopt, assign_func=None):
        """
        Create an Option, add its forms to _opt_info for getopt and index it by both forms.
        :param value: default value
        :param shortopt: short form for getopt
        :param longopt: long form for getopt
        :param assign_func: check and convert function for a new value
        :return:
        """
        opt = Option(value, shortopt, longopt, assign_func)
        self._opt_info[0] += shortopt
        self._opt_info[1].append(longopt)

        short_key = '-' + (shortopt if shortopt[-1] != ':' else shortopt[:-1])
        long_key = '--' + (longopt if longopt[-1] != '=' else longopt[:-1])
        assert self._opt_dict.get(short_key) is None
        assert self._opt_dict.get(long_key) is None
        self._opt_dict[short_key] = opt
        self._opt_dict[long_key] = opt

        return opt

    def _parse(self, argv):
        """
        The first argument is the action, the rest are options.
        :param argv: arguments
        :return:
        """
        self.action = Param.assign_action(argv)
        if self.is_help():
            return

        try:
            opts, unused = getopt(argv[1:], self._opt_info[0], self._opt_info[1])
        except GetoptError as e:
            raise ParamParseException(e.msg)

        if len(unused) > 0:
            raise ParamParseException('unknown argument {0}'.format(unused[0]))
        for key, value in opts:
            opt = self._opt_dict.get(key)
            assert opt is not None
            opt.assign(value)

    def _check(self):
        if self.action == Action.CHECK:
            if self.source_home.value is None and self.source_version.value is None:
                raise ParamParseException('one of --source-home or --source-version is required.')
            if self.target_home.value is None and self.target_version.value is None:
                raise ParamParseException('one of --target-home or --target-version is required.')
        elif self.action == Action.SHOW:
            if self.gphome.value is None:
                raise ParamParseException('--gphome is required.')

    def is_help(self):
        return self.action == Action.HELP

    @staticmethod
    def assign_action(argv):
        if len(argv) == 0:
            return Action.HELP

        action = argv[0]
        if action.lower() in ("help", "--help", "-h", "-?"):
            return Action.HELP
        elif action.lower() in ["check", "verify"]:
            return Action.CHECK
        elif action.lower() == "show":
            return Action.SHOW
        else:
            raise ParamParseException("wrong action '{0}'.".format(action))

    @staticmethod
    def assign_path(path):
        return os.path.abspath(path)

    @staticmethod
    def assign_debug(debug):
        return True
