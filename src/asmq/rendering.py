# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Markdown rendering for catalog descriptors."""

from __future__ import annotations

from collections.abc import Iterable

from .catalog.models import DirectiveInfo, InstructionInfo, RegisterInfo
from .config.models import Config


def render_instruction(info: InstructionInfo, config: Config) -> str:
    """Return Markdown describing ``info``.

    The architecture tag is omitted when ``info`` belongs to the configured
    instruction set.

    Args:
        info: Instruction descriptor.
        config: Configuration governing the queried location.

    Returns:
        str: Markdown document.
    """

    tags: list[str] = []
    if not config.is_arch_enabled(info.arch):
        tags.append(info.arch.value)
    if info.dialect is not None:
        tags.append(info.dialect.value)
    blocks = [
        _heading(info.name, tags),
        info.summary,
        _section("Forms", (f"`{form}`" for form in info.forms)),
        f"Aliases: {', '.join(info.aliases)}" if info.aliases else "",
        _more_info(info.url),
    ]
    return _join(blocks)


def render_register(info: RegisterInfo, config: Config) -> str:
    """Return Markdown describing the register ``info``."""

    tags = [] if config.is_arch_enabled(info.arch) else [info.arch.value]
    facts = "\n".join(
        line
        for line in (
            f"Type: {info.reg_type}" if info.reg_type else "",
            f"Width: {info.width}" if info.width else "",
        )
        if line
    )
    bits = (
        f"`{bit.bit}` **{bit.label}**: {bit.description}" if bit.description else f"`{bit.bit}` **{bit.label}**"
        for bit in info.bits
    )
    blocks = [
        _heading(info.name, tags),
        info.description,
        facts,
        _section("Bits", bits),
        _more_info(info.url),
    ]
    return _join(blocks)


def render_directive(info: DirectiveInfo, config: Config) -> str:
    """Return Markdown describing the directive ``info``."""

    tags = [] if config.assembler is info.assembler else [info.assembler.value]
    blocks = [
        _heading(info.name, tags),
        info.description,
        _section("Usage", (f"`{signature}`" for signature in info.signatures)),
        _more_info(info.url),
    ]
    return _join(blocks)


def _heading(name: str, tags: Iterable[str]) -> str:
    tag_list = list(tags)
    suffix = f" [{', '.join(tag_list)}]" if tag_list else ""
    return f"# {name}{suffix}"


def _section(title: str, items: Iterable[str]) -> str:
    lines = [f"- {item}" for item in items]
    if not lines:
        return ""
    return f"## {title}\n\n" + "\n".join(lines)


def _more_info(url: str | None) -> str:
    return f"More info: <{url}>" if url else ""


def _join(blocks: Iterable[str]) -> str:
    return "\n\n".join(block for block in blocks if block)


__all__ = ["render_directive", "render_instruction", "render_register"]
