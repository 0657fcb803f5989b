# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Command-line applications."""
