# city_search/app/build.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TextIO

from city_search.app.shell import Shell
from city_search.config.models import AppModel
from city_search.domain.store import PointStore
from city_search.io.reader import load_store
from city_search.io.search_logging import SearchLogging
from city_search.search.engine import SearchEngine
from city_search.search.hooks import NoopHooks


@dataclass
class App:
    config: AppModel
    store: PointStore
    engine: SearchEngine
    shell: Shell


def build(
    cfg: AppModel | Mapping | None = None,
    *,
    lines: Iterable[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    use_logging: bool = True,
) -> App:
    """
    Wire store, engine and shell. `lines` replaces the data file (tests).
    DataSourceError / FormatError from loading propagate to the caller.
    """
    # 0) Validate config
    if cfg is None:
        model = AppModel()
    else:
        model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        SearchLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Data, loaded once
    if lines is not None:
        store = PointStore.ingest(lines, source="<lines>", hooks=hooks)
    else:
        store = load_store(model.data.path, encoding=model.data.encoding, hooks=hooks)

    # 3) Engine & shell (store passed explicitly, no globals)
    engine = SearchEngine(hooks=hooks)
    shell = Shell(
        store,
        engine,
        stdin=stdin,
        stdout=stdout,
        exit_sentinel=model.shell.exit_sentinel,
        default_norm=model.shell.default_norm,
    )
    return App(model, store, engine, shell)
