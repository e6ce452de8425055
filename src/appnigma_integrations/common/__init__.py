# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Common utilities and constants for the Appnigma Integrations SDK.
"""
