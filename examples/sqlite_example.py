"""Example asyncio application persisting logs to SQLite.

Run with:
    python examples/sqlite_example.py

Writes are scheduled on the running event loop without blocking the
logging call; flush() waits for them before the entries are read back.
"""

import asyncio

from viol import Logger, SQLiteTransport, flush


async def main() -> None:
    transport = SQLiteTransport("logs.db")
    logger = Logger("worker", level="debug")
    logger.add_transport(transport)

    jobs = logger.child("jobs")
    for job_id in range(3):
        jobs.with_metadata({"job_id": job_id}).debug("job finished")
    logger.warn("queue drained")

    await flush()

    async for entry in transport.read():
        print("/".join(entry.scope), entry.level.name, entry.message, entry.metadata)
    print(f"{await transport.count()} entries stored")


if __name__ == "__main__":
    asyncio.run(main())
