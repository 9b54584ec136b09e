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
User define Exceptions
"""


class VersionCheckException(Exception):
    """
    Base of all exceptions raised by the version checker.
    """
    def __init__(self, msg):
        super(VersionCheckException, self).__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg


class ParamParseException(VersionCheckException):
    """
    Exception when parse params
    """
    pass


class LogFileException(VersionCheckException):
    """
    Exception when the log file could not be opened
    """
    def __init__(self, file_path, err):
        self.file_path = file_path
        super(LogFileException, self).__init__('cannot open log file {0}: {1}'.format(file_path, err))


class ExecutionError(VersionCheckException):
    """
    Exception when the version command could not be run or exited non-zero.
    status is None when the command could not be started.
    """
    def __init__(self, cmd, stat, output):
        self.cmd = cmd
        self.stat = stat
        self.output = output
        super(ExecutionError, self).__init__(
            'Command Execute Failed with err code {0}. \ncmd:\n{1}\nreason:\n{2}'.format(
                self.stat,
                self.cmd,
                self.output
            ))


class ParseError(VersionCheckException):
    """
    Exception when a version text could not be turned into an installed version.
    """
    def __init__(self, text, msg):
        self.text = text
        super(ParseError, self).__init__(msg)


class UnrecognizedBannerError(ParseError):
    def __init__(self, text):
        super(UnrecognizedBannerError, self).__init__(
            text,
            'version %r is not of the form '
            '"postgres (Greenplum/Cloudberry Database) #.#.#"' % text)


class VersionExtractionError(ParseError):
    def __init__(self, text):
        super(VersionExtractionError, self).__init__(
            text, 'no #.#.# version number found in version output %r' % text)


class InvalidFormatError(ParseError):
    def __init__(self, text):
        super(InvalidFormatError, self).__init__(
            text, "invalid database version format: %r, expected 'Type Version'" % text)


class UnknownFamilyError(ParseError):
    def __init__(self, text, family):
        self.family = family
        super(UnknownFamilyError, self).__init__(text, 'unknown database type: %s' % family)


class InvalidVersionError(ParseError):
    def __init__(self, text, version, reason):
        self.version = version
        self.reason = reason
        super(InvalidVersionError, self).__init__(
            text, 'invalid version format %r: %s' % (version, reason))


class CompatibilityError(VersionCheckException):
    """
    Exception when an upgrade from source to target is not allowed.
    """
    def __init__(self, source, target, msg):
        self.source = source
        self.target = target
        super(CompatibilityError, self).__init__('Unsupported source and target versions. ' + msg)


class UnsupportedTransitionError(CompatibilityError):
    def __init__(self, source, target, supported):
        self.supported = supported
        super(UnsupportedTransitionError, self).__init__(
            source, target,
            'Found source version %s and target version %s. '
            'Upgrade is only supported for %s. '
            'Check the documentation for further information.' % (source, target, ', '.join(supported)))


class SourceVersionTooLowError(CompatibilityError):
    def __init__(self, source, target, floor):
        self.floor = floor
        super(SourceVersionTooLowError, self).__init__(
            source, target,
            'Source cluster version %s is not supported. '
            'The minimum required version is %s. '
            'We recommend the latest version.' % (source, floor))


class TargetVersionTooLowError(CompatibilityError):
    def __init__(self, source, target, floor):
        self.floor = floor
        super(TargetVersionTooLowError, self).__init__(
            source, target,
            'Target cluster version %s is not supported. '
            'The minimum required version is %s. '
            'We recommend the latest version.' % (target, floor))


class DowngradeNotSupportedError(CompatibilityError):
    def __init__(self, source, target):
        super(DowngradeNotSupportedError, self).__init__(
            source, target,
            'Target version %s must not be of a lower major version than source version %s. '
            'The lowest allowed target major version is %d.' % (target, source, source.version.major))


class CrossFamilyNotSupportedError(CompatibilityError):
    def __init__(self, source, target):
        super(CrossFamilyNotSupportedError, self).__init__(
            source, target,
            'Upgrade from %s to %s is not supported now.' % (source, target))


class CrossFamilyReverseNotSupportedError(CompatibilityError):
    def __init__(self, source, target):
        super(CrossFamilyReverseNotSupportedError, self).__init__(
            source, target,
            'Cannot upgrade from %s to %s, Cloudberry to Greenplum is not supported.' % (source, target))


class UnsupportedFamilyCombinationError(CompatibilityError):
    def __init__(self, source, target):
        super(UnsupportedFamilyCombinationError, self).__init__(
            source, target,
            'Upgrade from %s to %s is not supported. '
            'Check the documentation for further information.' % (source, target))
