"""Scheduling and engine hooks -- delays, repeats, cancellation, shutdown.

Demonstrates:
- on_start / on_stop lifecycle hooks
- One-shot callbacks with scheduler.after()
- Periodic callbacks with scheduler.every() and cancelling them
- Using ctx.request_stop() to end the simulation early

Run: python -m examples.lifecycle
"""

from tick import Engine
from tick.types import TickContext


def main() -> None:
    print("=== Scheduling & Lifecycle ===\n")

    engine = Engine(tps=10)
    sched = engine.scheduler

    engine.on_start(lambda ctx: print(f"  [start] at tick {ctx.tick_number}"))
    engine.on_stop(lambda ctx: print(f"  [stop]  at tick {ctx.tick_number}"))

    # A heartbeat every 2 ticks, cancelled at tick 7.
    heartbeat = sched.every(2, lambda: print(f"  [tick {sched.now}] heartbeat"))

    def stop_heartbeat() -> None:
        heartbeat.cancel()
        print(f"  [tick {sched.now}] heartbeat cancelled")

    sched.after(7, stop_heartbeat)

    # Seconds convert to ticks through the clock.
    delay = engine.clock.ticks_for(1.0)
    sched.after(delay, lambda: print(f"  [tick {sched.now}] one second has passed"))

    def stop_at_twelve(ctx: TickContext) -> None:
        if ctx.tick_number == 12:
            print(f"  [tick {ctx.tick_number}] requesting stop")
            ctx.request_stop()

    engine.add_system(stop_at_twelve)

    # Asked for 100 ticks, but the system stops us at 12.
    engine.run(100)
    print(f"\nPending callbacks left: {sched.pending()}")
    engine.shutdown()
    print(f"After shutdown: {sched.pending()}")


if __name__ == "__main__":
    main()
