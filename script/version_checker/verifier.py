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
Verify components, used together for the whole check.
    collector: gets the installed versions of the source and target installations.
    analyzer: decides whether the upgrade from source to target is allowed.
"""

from version_checker.log import logger
from version_checker.retriever import VersionRetriever
from version_checker.validator import CompatibilityValidator


class Collector(object):
    """
    Gets the installed version of the source and target installations.
    """
    def __init__(self, retriever=None):
        self.retriever = retriever if retriever is not None else VersionRetriever()

    def version_of(self, home):
        version = self.retriever.version(home)
        logger.log('Version of %s: %s.' % (home, version))
        return version

    def collect(self, source_home, target_home):
        """
        :param source_home: root of the installation the cluster runs on
        :param target_home: root of the installation to upgrade to
        :return: source InstalledVersion, target InstalledVersion
        """
        return self.version_of(source_home), self.version_of(target_home)


class Analyzer(object):
    """
    Runs the compatibility validator and records the decision.
    """
    def __init__(self, validator=None):
        self.validator = validator if validator is not None else CompatibilityValidator()

    def __str__(self):
        return 'Analyzer: supports [{0}]'.format(', '.join(self.validator.supported_transitions()))

    def analyze(self, source, target):
        logger.debug('Checking upgrade from %s to %s. %s' % (source, target, self))
        self.validator.validate(source, target)
        logger.log('Upgrade from %s to %s is supported.' % (source, target))


def verify_compatible_versions(source_home, target_home, retriever=None, validator=None):
    """
    Check that the cluster installed in source_home can be upgraded to the one in target_home.
    Raises ExecutionError, ParseError or CompatibilityError.
    :return: source InstalledVersion, target InstalledVersion
    """
    source, target = Collector(retriever).collect(source_home, target_home)
    Analyzer(validator).analyze(source, target)
    return source, target
