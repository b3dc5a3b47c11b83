# SPDX-License-Identifier: LGPL-3.0-or-later
# stackvm/cli/__init__.py
