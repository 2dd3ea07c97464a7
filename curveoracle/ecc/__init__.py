#!/usr/bin/env python3

# Copyright (C) 2024-2026 The curveoracle developers
#
# This file is part of curveoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of curveoracle including this file, may be copied, modified,
# propagated, or distributed except according to the terms contained in the
# LICENSE file.

"__init__ module for the curveoracle.ecc package."
