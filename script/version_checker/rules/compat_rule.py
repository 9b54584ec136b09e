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
Supported upgrade transitions.
This table is the only place that says which upgrades are supported, add a
CompatibilityRule here to support a new transition.
"""

from collections import namedtuple

from version_checker.database import DatabaseFamily, SemanticVersion


# Change these values to bump the minimum supported versions and associated tests.
MIN_GREENPLUM_5X_VERSION = SemanticVersion(5, 29, 10)
MIN_GREENPLUM_6X_VERSION = SemanticVersion(6, 0, 0)
MIN_GREENPLUM_7X_VERSION = SemanticVersion(7, 0, 0)


class VersionRange(namedtuple('VersionRange', ['floor', 'ceiling'])):
    """
    floor <= version < ceiling
    """
    __slots__ = ()

    def __contains__(self, version):
        return version.in_range(self.floor, self.ceiling)

    def __str__(self):
        return '>=%s <%s' % (self.floor, self.ceiling)


class CompatibilityRule(namedtuple('CompatibilityRule', ['source_family', 'source_major',
                                                         'target_family', 'target_major',
                                                         'source_range', 'target_range'])):
    """
    One supported major version transition, with the allowed range of both sides.
    """
    __slots__ = ()

    @property
    def key(self):
        return self.source_family, self.source_major, self.target_family, self.target_major

    def __str__(self):
        return '%s %d to %s %d' % (self.source_family.display_name, self.source_major,
                                   self.target_family.display_name, self.target_major)


GREENPLUM_5X_RANGE = VersionRange(MIN_GREENPLUM_5X_VERSION, SemanticVersion(6, 0, 0))
GREENPLUM_6X_RANGE = VersionRange(MIN_GREENPLUM_6X_VERSION, SemanticVersion(7, 0, 0))
GREENPLUM_7X_RANGE = VersionRange(MIN_GREENPLUM_7X_VERSION, SemanticVersion(8, 0, 0))

GREENPLUM_RULES = (
    CompatibilityRule(DatabaseFamily.GREENPLUM, 5, DatabaseFamily.GREENPLUM, 6,
                      GREENPLUM_5X_RANGE, GREENPLUM_6X_RANGE),
    CompatibilityRule(DatabaseFamily.GREENPLUM, 6, DatabaseFamily.GREENPLUM, 6,
                      GREENPLUM_6X_RANGE, GREENPLUM_6X_RANGE),
    CompatibilityRule(DatabaseFamily.GREENPLUM, 6, DatabaseFamily.GREENPLUM, 7,
                      GREENPLUM_6X_RANGE, GREENPLUM_7X_RANGE),
    CompatibilityRule(DatabaseFamily.GREENPLUM, 7, DatabaseFamily.GREENPLUM, 7,
                      GREENPLUM_7X_RANGE, GREENPLUM_7X_RANGE),
)


def make_rule_table(rules):
    """
    :param rules: iterable of CompatibilityRule
    :return: dict keyed by (source family, source major, target family, target major)
    """
    table = {}
    for rule in rules:
        if rule.key in table:
            raise ValueError('duplicate rule %s' % (rule,))
        table[rule.key] = rule
    return table


RULE_TABLE = make_rule_table(GREENPLUM_RULES)
