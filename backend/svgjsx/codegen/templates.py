"""Component source templates (TSX and JSX variants)."""

from __future__ import annotations

import re

from svgjsx.models.options import DEFAULT_COMPONENT_NAME

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")

DEFAULT_SIZE = 24

_PROPS_INTERFACE = """\
interface {name}Props extends React.SVGProps<SVGSVGElement> {{
  className?: string;
  size?: number | string;
  color?: string;
}}

"""


def component_name(raw: str) -> str:
    """Caller identifier → component name.

    Non-alphanumerics are removed (``"My Icon!"`` → ``MyIcon``) and case is
    kept. A leading digit gets an ``Svg`` prefix so the result is a valid
    identifier. Empty results fall back to ``SvgIcon``.
    """
    name = _NON_ALNUM.sub("", raw)
    if not name:
        return DEFAULT_COMPONENT_NAME
    if name[0].isdigit():
        name = "Svg" + name
    return name


def render_component(
    name: str,
    markup: str,
    *,
    typed: bool,
    memo: bool,
    stylesheet_import: bool,
) -> str:
    """Wrap rendered markup (already indented) in a component module."""
    imports = 'import React, { memo } from "react";\n' if memo else 'import React from "react";\n'
    if stylesheet_import:
        imports += f'import styles from "./{name}.module.css";\n'

    params = f"{{ className, size = {DEFAULT_SIZE}, color, ...props }}"
    if typed:
        head = _PROPS_INTERFACE.format(name=name) + f"const {name}: React.FC<{name}Props> = ({params}) => ("
    else:
        head = f"const {name} = ({params}) => ("

    export = f"memo({name})" if memo else name
    return f"{imports}\n{head}\n{markup}\n);\n\nexport default {export};\n"
