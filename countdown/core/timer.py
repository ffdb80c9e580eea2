"""A simple count down timer implementation.

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

from absl import logging


class Timer(object):
  """A count down timer over a monotonic clock.

  The timer does nothing until `start` is called. Once started it reports
  whether its duration has elapsed, how many seconds remain, and what fraction
  of the duration has passed. Calling `start` again restarts the countdown.

  Example usage:

  ```python
  timer = countdown.Timer(3.)
  timer.start()
  while not timer.time_up():
    print("Remaining time: {:.1f}s".format(timer.secs_remaining()))
    time.sleep(.1)
  ```
  """

  def __init__(self, duration_secs, start_immediately=False,
               clock=time.monotonic):
    """Initializes a `Timer`.

    Args:
      duration_secs: Float seconds for countdown. Must be positive.
      start_immediately: Whether to call `start` before returning.
      clock: Zero-argument callable returning monotonic float seconds.

    Returns:
      A `Timer` instance.

    Raises:
      ValueError: If `duration_secs` is not positive.
    """

    if duration_secs <= 0.:
      raise ValueError(
          "Timer duration must be positive, got: {}".format(duration_secs))
    self._duration_secs = float(duration_secs)
    self._clock = clock
    self._start_time_secs = None
    self._running = False
    if start_immediately:
      self.start()

  @property
  def duration_secs(self):
    """The configured countdown duration in seconds."""

    return self._duration_secs

  @property
  def running(self):
    """Whether `start` has been called."""

    return self._running

  def start(self):
    """Starts or restarts the countdown from the current time."""

    self._start_time_secs = self._clock()
    self._running = True
    logging.debug("Started %.3f sec countdown", self._duration_secs)

  def _elapsed_secs(self):
    return self._clock() - self._start_time_secs

  def time_up(self):
    """Returns whether the timer was started and its duration has elapsed."""

    if not self._running:
      return False
    return self._elapsed_secs() >= self._duration_secs

  def time_up_and_try_restart(self):
    """Returns `time_up()`, restarting the timer when it is True.

    The restart is anchored at the time of this call rather than at the moment
    the countdown actually expired, so a timer polled this way drifts by up to
    one polling interval per cycle.
    """

    time_is_up = self.time_up()
    if time_is_up:
      self.start()
    return time_is_up

  def secs_remaining(self):
    """Returns the remaining countdown seconds.

    The full duration is returned while the timer has not been started, and
    zero once it has expired.
    """

    if not self._running:
      return self._duration_secs
    diff = self._duration_secs - self._elapsed_secs()
    return max(0., diff)

  def percent_complete(self):
    """Returns the elapsed fraction of the duration in [0, 1]."""

    if not self._running:
      return 0.
    progress = self._elapsed_secs() / self._duration_secs
    return min(1., max(0., progress))

  def change_duration(self, duration_secs):
    """Sets a new countdown duration without restarting the timer.

    Non-positive values are ignored and the previous duration is kept. Elapsed
    time is still measured from the last `start`, so shortening a running timer
    can expire it immediately, and lengthening it moves its progress backwards.

    Args:
      duration_secs: New float seconds for countdown.
    """

    if duration_secs <= 0.:
      logging.debug("Ignoring non-positive timer duration: %s", duration_secs)
      return
    self._duration_secs = float(duration_secs)

  def __repr__(self):
    return "Timer(duration_secs={}, running={})".format(
        self._duration_secs, self._running)
