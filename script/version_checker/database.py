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
Database identity: family, semantic version and the installed version built
from the two, plus the parsers for the version banner and the compact
"Family Version" form.
"""

import re
from collections import namedtuple
from enum import Enum

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version

from version_checker.utils.exception import InvalidFormatError, InvalidVersionError, \
    UnknownFamilyError, UnrecognizedBannerError, VersionExtractionError


class DatabaseFamily(Enum):
    """
    Product lineage of an installation.
    """
    GREENPLUM = 0
    CLOUDBERRY = 1

    @property
    def display_name(self):
        return FAMILY_DISPLAY_NAMES[self]

    @staticmethod
    def from_name(name):
        """
        Case-insensitive lookup of a family by its canonical name.
        :param name: family name, e.g. 'Greenplum', 'cloudberry'
        :return: DatabaseFamily, or None when the name is unknown
        """
        for family, display_name in FAMILY_DISPLAY_NAMES.items():
            if display_name.lower() == name.lower():
                return family
        return None


FAMILY_DISPLAY_NAMES = {
    DatabaseFamily.GREENPLUM: 'Greenplum',
    DatabaseFamily.CLOUDBERRY: 'Cloudberry',
}

# Checked in order, the first marker found decides the family.
BANNER_MARKERS = (
    ('postgres (Greenplum Database) ', DatabaseFamily.GREENPLUM),
    ('postgres (Apache Cloudberry) ', DatabaseFamily.CLOUDBERRY),
    ('postgres (Cloudberry Database) ', DatabaseFamily.CLOUDBERRY),
)

VERSION_PATTERN = re.compile(r'\d+\.\d+\.\d+')


class SemanticVersion(namedtuple('SemanticVersion', ['major', 'minor', 'patch'])):
    """
    major.minor.patch, ordered and compared component by component.
    """
    __slots__ = ()

    def __str__(self):
        return '%d.%d.%d' % (self.major, self.minor, self.patch)

    @staticmethod
    def parse(text):
        """
        Strict parse of a #.#.# string.
        :param text: version string
        :return: SemanticVersion
        """
        match = re.fullmatch(r'(\d+)\.(\d+)\.(\d+)', text)
        if match is None:
            raise ValueError('%r is not of the form #.#.#' % text)
        return SemanticVersion(*[int(part) for part in match.groups()])

    @staticmethod
    def parse_tolerant(text):
        """
        Parse a loosely written version such as 'v6', '6.1' or ' 6.1.2 '.
        Missing minor and patch numbers are zero.
        :param text: version string
        :return: SemanticVersion
        """
        version = Version(text.strip())
        if version.epoch != 0 or version.local is not None or \
                version.is_prerelease or version.is_postrelease:
            raise InvalidVersion('only major.minor.patch is supported')
        if len(version.release) > 3:
            raise InvalidVersion('more than three version components')
        return SemanticVersion(*(version.release + (0, 0))[:3])

    def in_range(self, low, high):
        """
        :return: True when low <= self < high
        """
        return Version(str(self)) in SpecifierSet('>=%s,<%s' % (low, high))


class InstalledVersion(namedtuple('InstalledVersion', ['family', 'version'])):
    """
    Identity of one database installation.
    """
    __slots__ = ()

    def __str__(self):
        if isinstance(self.family, DatabaseFamily):
            name = self.family.display_name
        else:
            name = 'Unknown'
        return '%s %s' % (name, self.version)


def parse_banner(text):
    """
    Parse the output of 'postgres --gp-version', e.g.
        postgres (Greenplum Database) 6.26.0 build commit:...
    :param text: raw banner
    :return: InstalledVersion
    """
    raw = text.strip()
    for marker, family in BANNER_MARKERS:
        idx = raw.find(marker)
        if idx < 0:
            continue

        match = VERSION_PATTERN.search(raw, idx + len(marker))
        if match is None:
            raise VersionExtractionError(text)
        return InstalledVersion(family, SemanticVersion.parse(match.group()))

    raise UnrecognizedBannerError(text)


def parse_installed_version(text):
    """
    Parse the compact form written by str(InstalledVersion), e.g. 'Greenplum 6.26.0'.
    :param text: 'Type Version'
    :return: InstalledVersion
    """
    parts = [part.strip() for part in text.strip().split(' ', 1)]
    if len(parts) != 2 or '' in parts:
        raise InvalidFormatError(text)

    family = DatabaseFamily.from_name(parts[0])
    if family is None:
        raise UnknownFamilyError(text, parts[0])

    try:
        version = SemanticVersion.parse_tolerant(parts[1])
    except InvalidVersion as e:
        raise InvalidVersionError(text, parts[1], str(e)) from e

    return InstalledVersion(family, version)
