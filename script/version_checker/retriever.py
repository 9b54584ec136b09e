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
Get the version of an installation by running its postgres binary.
"""

import os

from version_checker.database import parse_banner
from version_checker.log import logger
from version_checker.utils.command import Shell
from version_checker.utils.exception import ExecutionError
from version_checker.utils.version import POSTGRES_BIN, VERSION_ARG


class VersionRetriever(object):
    """
    Runs '<home>/bin/postgres --gp-version' through a command strategy and parses the output.
    The strategy is a callable (argv, env) -> (status, output), Shell.run by default.
    """

    def __init__(self, command=None):
        self._command = command if command is not None else Shell.run

    @staticmethod
    def version_command(home):
        return [os.path.join(home, 'bin', POSTGRES_BIN), VERSION_ARG]

    def banner(self, home):
        """
        :param home: installation root, e.g. /usr/local/greenplum-db
        :return: raw output of the version command
        """
        argv = VersionRetriever.version_command(home)
        cmd = Shell.cmdline(argv)
        logger.log('Executing: %s' % cmd)

        try:
            stat, output = self._command(argv, {})
        except OSError as e:
            raise ExecutionError(cmd, None, str(e)) from e

        if stat != 0:
            raise ExecutionError(cmd, stat, output)

        logger.debug('%s output: %s' % (cmd, output.strip()))
        return output

    def version(self, home):
        """
        :param home: installation root
        :return: InstalledVersion
        """
        return parse_banner(self.banner(home))
