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

import subprocess
from subprocess import PIPE, STDOUT

import psutil


class Shell(object):

    @staticmethod
    def run(argv, env=None):
        """
        Run a command without a shell and capture stdout and stderr together.
        :param argv: program path followed by its arguments
        :param env: environment of the child, {} for an empty one
        :return: exit status, combined output
        """
        proc = psutil.Popen(argv, stdout=PIPE, stderr=STDOUT, env=env,
                            encoding='utf-8', errors='replace')
        output, _ = proc.communicate()
        return proc.returncode, output

    @staticmethod
    def cmdline(argv):
        return subprocess.list2cmdline(argv)
