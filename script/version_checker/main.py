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

import sys

from version_checker.log import logger
from version_checker.project import ProjectFactory
from version_checker.utils.exception import VersionCheckException
from version_checker.utils.param import Param


def main(argv=None):
    param = Param(argv if argv is not None else sys.argv)
    if param.error is not None:
        print('ERROR:', param.error)
        print(Param.helper)
        return 2

    if param.is_help():
        print(Param.helper)
        return 0

    project = ProjectFactory.produce(param)
    try:
        project.init()
        return project.run()
    except VersionCheckException as e:
        logger.error(str(e))
        return 1
    finally:
        project.close()


if __name__ == "__main__":
    sys.exit(main())
