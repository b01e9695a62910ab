"""Job scheduling: `termux-job-scheduler`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import ScheduleJobParams
from termux_api.core.executor import execute


def build_schedule_args(params: ScheduleJobParams) -> list[str]:
    args = ["--script", params.script_path]
    if params.job_id is not None:
        args += ["--job-id", render_token(params.job_id)]
    if params.period_ms is not None:
        args += ["--period-ms", render_token(params.period_ms)]
    if params.network_type:
        args += ["--network", params.network_type]
    flags = (
        ("--battery-not-low", params.battery_not_low),
        ("--charging", params.charging),
        ("--persisted", params.persisted),
        ("--idle", params.idle),
        ("--storage-not-low", params.storage_not_low),
    )
    for flag, value in flags:
        if value is not None:
            args += [flag, render_token(value)]
    return args


async def schedule_job(params: ScheduleJobParams, *, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("job-scheduler", build_schedule_args(params)), settings=settings)


async def cancel_job(job_id: int, *, settings: AppSettings | None = None) -> str:
    args = ["--cancel", "--job-id", render_token(job_id)]
    return await execute(Invocation.of("job-scheduler", args), settings=settings)


async def cancel_all_jobs(*, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("job-scheduler", ["--cancel-all"]), settings=settings)


async def list_pending_jobs(*, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("job-scheduler", ["--pending"]), settings=settings)
