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
Decides whether an upgrade from a source installed version to a target
installed version is allowed.
"""

from version_checker.database import DatabaseFamily
from version_checker.rules.compat_rule import RULE_TABLE
from version_checker.utils.exception import CompatibilityError, CrossFamilyNotSupportedError, \
    CrossFamilyReverseNotSupportedError, DowngradeNotSupportedError, SourceVersionTooLowError, \
    TargetVersionTooLowError, UnsupportedFamilyCombinationError, UnsupportedTransitionError


class CompatibilityValidator(object):
    """
    Pure decision on (source, target). validate() raises a CompatibilityError when the
    upgrade is rejected and returns None otherwise.
    """

    def __init__(self, rules=None):
        """
        :param rules: rule table as built by make_rule_table, RULE_TABLE by default
        """
        self.rules = rules if rules is not None else RULE_TABLE
        self._family_checks = {
            (DatabaseFamily.GREENPLUM, DatabaseFamily.GREENPLUM): self._check_by_rule,
            (DatabaseFamily.CLOUDBERRY, DatabaseFamily.CLOUDBERRY): self._check_no_downgrade,
            (DatabaseFamily.GREENPLUM, DatabaseFamily.CLOUDBERRY): self._reject_cross_family,
            (DatabaseFamily.CLOUDBERRY, DatabaseFamily.GREENPLUM): self._reject_cross_family_reverse,
        }

    def supported_transitions(self):
        return [str(rule) for rule in self.rules.values()]

    def validate(self, source, target):
        """
        :param source: InstalledVersion of the running cluster
        :param target: InstalledVersion to upgrade to
        :return: None
        """
        check = self._family_checks.get((source.family, target.family))
        if check is None:
            raise UnsupportedFamilyCombinationError(source, target)
        check(source, target)

    def is_compatible(self, source, target):
        try:
            self.validate(source, target)
        except CompatibilityError:
            return False
        return True

    def _check_by_rule(self, source, target):
        rule = self.rules.get((source.family, source.version.major,
                               target.family, target.version.major))
        if rule is None:
            raise UnsupportedTransitionError(source, target, self.supported_transitions())

        if source.version not in rule.source_range:
            raise SourceVersionTooLowError(source, target, rule.source_range.floor)

        if target.version not in rule.target_range:
            raise TargetVersionTooLowError(source, target, rule.target_range.floor)

    @staticmethod
    def _check_no_downgrade(source, target):
        if target.version.major < source.version.major:
            raise DowngradeNotSupportedError(source, target)

    @staticmethod
    def _reject_cross_family(source, target):
        raise CrossFamilyNotSupportedError(source, target)

    @staticmethod
    def _reject_cross_family_reverse(source, target):
        raise CrossFamilyReverseNotSupportedError(source, target)
