"""Test utilities for Countdown.

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


class FakeClock(object):
  """A monotonic clock that only moves when told to."""

  def __init__(self, now_secs=100.):
    self._now_secs = now_secs

  def __call__(self):
    return self._now_secs

  def advance(self, secs):
    self._now_secs += secs

  def sleep(self, secs):
    """Stands in for `time.sleep` by advancing the clock."""

    self.advance(secs)
