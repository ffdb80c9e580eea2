# Lint as: python3
"""Polls a countdown until it expires, optionally restarting it.

Copyright 2026 The Countdown Authors. All Rights Reserved.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    https://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import time

from absl import app
from absl import flags
from absl import logging
from countdown.core.timer import Timer

FLAGS = flags.FLAGS
flags.DEFINE_float("duration_secs", 3., "Length of each countdown in seconds.")
flags.DEFINE_float(
    "delay_secs", 0.,
    "Seconds of setup work to wait before starting the timer.",
    lower_bound=0.)
flags.DEFINE_float("poll_interval_secs", .1,
                   "Seconds to sleep between polls of the timer.")
flags.DEFINE_integer(
    "restarts", 0,
    "Number of extra countdowns to run by restarting the timer whenever it "
    "expires.",
    lower_bound=0)

flags.register_validator(
    "duration_secs", lambda value: value > 0.,
    message="--duration_secs must be positive.")
flags.register_validator(
    "poll_interval_secs", lambda value: value > 0.,
    message="--poll_interval_secs must be positive.")


def run_countdown(timer, poll_interval_secs, sleep_fn=time.sleep, restarts=0):
  """Polls a started timer until it has expired `restarts + 1` times.

  Every expiry but the last restarts the timer through
  `time_up_and_try_restart`.

  Args:
    timer: A started `Timer`.
    poll_interval_secs: Float seconds to sleep between polls.
    sleep_fn: Callable used to sleep between polls.
    restarts: Number of times to restart the timer after it expires.

  Returns:
    The number of countdowns that ran to completion.

  Raises:
    ValueError: If `timer` was never started.
  """

  if not timer.running:
    raise ValueError("Timer must be started before polling it.")
  cycles = 0
  while True:
    if cycles < restarts:
      expired = timer.time_up_and_try_restart()
    else:
      expired = timer.time_up()
    if expired:
      cycles += 1
      logging.info("Countdown %d of %d finished.", cycles, restarts + 1)
      if cycles > restarts:
        return cycles
      continue
    logging.info("Remaining time: %.2fs (%.0f%%)", timer.secs_remaining(),
                 100. * timer.percent_complete())
    sleep_fn(poll_interval_secs)


def main(argv):
  del argv  # Unused

  timer = Timer(FLAGS.duration_secs)
  if FLAGS.delay_secs:
    logging.info("Preparing for %.2fs...", FLAGS.delay_secs)
    time.sleep(FLAGS.delay_secs)
  timer.start()
  cycles = run_countdown(
      timer, FLAGS.poll_interval_secs, restarts=FLAGS.restarts)
  logging.info("Timer finished after %d countdown(s).", cycles)


if __name__ == "__main__":
  app.run(main)
