from __future__ import annotations

from typing import Optional

from icongen.mcp_server.components import ServerComponents
from icongen.mcp_server.facade import IconToolFacade

components: Optional[ServerComponents] = None


def set_components(value: Optional[ServerComponents]) -> None:
    global components
    components = value


def require_components() -> None:
    if components is None:
        raise RuntimeError("Server components have not been initialised")


def ensure_facade() -> IconToolFacade:
    require_components()
    assert components is not None
    return components.facade
