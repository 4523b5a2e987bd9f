#!/usr/bin/env python3
"""
Watch one process and show its memory / CPU history.

Example:
    procview --pid 1234 --ticks 30 --chart-dir charts
"""
import sys
from typing import Optional, Sequence

from procview.cli.cli import parse_watch_args
from procview.config.config_loader import ConfigLoader
from procview.consts import MetricKind
from procview.errors import ProcviewError
from procview.history.sample_updater import SampleUpdater, create_process_histories
from procview.monitor.process_sampler import ProcessSampler
from procview.monitor.process_watcher import ProcessWatcher
from procview.render.chart import save_history_chart
from procview.render.export import write_history_csv
from procview.render.table import render_table
from procview.util.log_config import configure_package_logging, setup_logger

logger = setup_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_watch_args(argv)

    try:
        config = ConfigLoader(args.config, args.env).config_data
    except (ProcviewError, OSError) as e:
        logger.error(str(e))
        return 2
    configure_package_logging(config.log_level, config.log_file)

    try:
        sampler = ProcessSampler(args.pid)
    except ProcviewError as e:
        logger.error(str(e))
        return 1

    memory_history, cpu_history = create_process_histories(sampler.total_memory(), config.history_size)
    histories = {
        MetricKind.MEMORY.value: memory_history,
        MetricKind.CPU.value: cpu_history,
    }

    def show(report):
        if not args.quiet:
            print(render_table(report, histories), flush=True)

    watcher = ProcessWatcher(
        sampler,
        SampleUpdater(memory_history, cpu_history),
        interval=config.tick_interval,
        on_tick=show,
    )
    logger.info(f"Watching process {args.pid} every {config.tick_interval}s")
    try:
        watcher.run(max_ticks=args.ticks)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except ProcviewError as e:
        logger.error(str(e))
        return 1
    logger.info(f"{watcher.ticks} ticks recorded")

    chart_dir = args.chart_dir or config.chart_dir
    if chart_dir is not None:
        for kind, history in ((MetricKind.MEMORY, memory_history), (MetricKind.CPU, cpu_history)):
            path = save_history_chart(history, chart_dir / f"{kind.value}.png", kind.title)
            logger.info(f"Chart saved: {path}")
    if args.csv is not None:
        logger.info(f"History saved: {write_history_csv(histories, args.csv)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
