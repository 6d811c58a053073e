from __future__ import annotations

"""
Directory Menu Facade.

Single object entry point for library users: constructing a DirMenu
validates the options, collects the directory tree and renders the HTML,
which is then available as the `html` attribute.

    menu = DirMenu(mode="all", start_path="/var/www/site", url_root="/", recurse=True)
    page = fill_template(page, {"menu": menu.html})
"""

import logging
from typing import Any, Mapping, Optional, Union

from dirmenu.core.pipeline.engine import build_menu
from dirmenu.core.pipeline.stages.validator import validate_config
from dirmenu.domain.config import MenuConfig
from dirmenu.domain.menu_models import DirectoryMap
from dirmenu.domain.pipeline_models import MenuResult

logger = logging.getLogger(__name__)


class DirMenu:
    """
    HTML menu of a directory tree, built at construction time.

    Attributes:
        config: The validated MenuConfig.
        result: Full MenuResult of the run.
        directory_map: Collected entries keyed by directory URL.
        html: The rendered menu fragment.
    """

    def __init__(
            self,
            config: Optional[Union[MenuConfig, Mapping[str, Any]]] = None,
            **options: Any,
    ):
        """
        Validate options, then collect and render the menu.

        Args:
            config: A MenuConfig, or a mapping of raw options.
            **options: Raw options; merged over a mapping config.

        Raises:
            ConfigurationError: If the options are missing or invalid.
        """
        if isinstance(config, MenuConfig):
            if options:
                raise TypeError("Keyword options cannot be combined with a MenuConfig instance.")
            self.config = config
        else:
            raw = dict(config or {})
            raw.update(options)
            self.config, warnings = validate_config(raw)
            for warning in warnings:
                logger.warning(f"Configuration Warning: {warning}")

        self.result: MenuResult = build_menu(self.config)

    @property
    def directory_map(self) -> DirectoryMap:
        return self.result.directory_map

    @property
    def html(self) -> str:
        return self.result.html

    def __str__(self) -> str:
        return self.html
