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
"Project" file, one run of the program is a project.
The project is built from the params, then initialized, run and closed.
"""

from version_checker.database import parse_installed_version
from version_checker.log import logger
from version_checker.utils.exception import ParamParseException, VersionCheckException
from version_checker.utils.param import Action
from version_checker.utils.version import VERSION_CHECKER_VERSION
from version_checker.verifier import Analyzer, Collector


class Project(object):

    def __init__(self, param, retriever=None, validator=None):
        """
        :param param: params of this run
        :param retriever: VersionRetriever, the default one runs the real binaries
        :param validator: CompatibilityValidator
        """
        assert param.action != Action.HELP
        self.param = param
        self.collector = Collector(retriever)
        self.analyzer = Analyzer(validator)

    def __str__(self):
        return self.param.__str__()

    def init(self):
        if self.param.log_file.value is not None:
            logger.set_file(self.param.log_file.value)
        logger.set_debug(self.param.debug.value)

        logger.log('gp_versionchk %s start.' % VERSION_CHECKER_VERSION)
        logger.debug('Project info:\n' + self.__str__())

    def run(self):
        """
        :return: exit status of the program
        """
        try:
            return self._run()
        except VersionCheckException as e:
            logger.error(str(e))
            return 1

    def _run(self):
        return 0

    def close(self):
        logger.close()


class CheckProj(Project):
    def __init__(self, param, retriever=None, validator=None):
        assert param.action == Action.CHECK
        super(CheckProj, self).__init__(param, retriever, validator)

    def _installed_version(self, home, version):
        if version is not None:
            return parse_installed_version(version)
        return self.collector.version_of(home)

    def _run(self):
        source = self._installed_version(self.param.source_home.value, self.param.source_version.value)
        target = self._installed_version(self.param.target_home.value, self.param.target_version.value)

        self.analyzer.analyze(source, target)
        logger.info('Upgrade from %s to %s is supported.' % (source, target))
        return 0


class ShowProj(Project):
    def __init__(self, param, retriever=None, validator=None):
        assert param.action == Action.SHOW
        super(ShowProj, self).__init__(param, retriever, validator)

    def _run(self):
        print(self.collector.version_of(self.param.gphome.value))
        return 0


class ProjectFactory(object):
    @staticmethod
    def produce(param, retriever=None, validator=None):
        if param.action == Action.CHECK:
            return CheckProj(param, retriever, validator)
        elif param.action == Action.SHOW:
            return ShowProj(param, retriever, validator)
        else:
            raise ParamParseException('unsupported action %s.' % param.action)
