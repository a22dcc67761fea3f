# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared CLI plumbing (errors, logging adapters, Typer helpers)."""
