# ==============================================
# RunningMoments
# ==============================================
#
# PURPOSE:
#   Single-pass mean / variance / min / max over a stream of floats
#   using Welford's online update. Nothing is buffered: memory use is
#   constant no matter how many samples are pushed.
#
# UPDATE (per sample x):
# ----------------------
#   n     = n + 1
#   delta = x - mean
#   mean  = mean + delta / n
#   m2    = m2 + delta * (x - mean)      # mean AFTER the update
#
#   m2 is the running sum of squared deviations; it never goes
#   negative because delta and (x - mean_new) always share a sign.
#
# ==============================================

import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class RunningMoments:
    """
    Welford accumulator for one numeric column.

    All arithmetic is 64-bit float; integer-looking inputs are folded
    as floats.
    """

    count: int = 0  # Samples folded so far (the Welford divisor)
    mean: float = 0.0
    m2: float = 0.0  # Sum of squared deviations from the mean
    min: Optional[float] = None
    max: Optional[float] = None

    def push(self, x: float) -> None:
        """
        Fold one sample into the running moments.

        Args:
            x: The sample value
        """
        self.count += 1
        delta = x - self.mean
        self.mean += delta / self.count
        self.m2 += delta * (x - self.mean)

        if self.min is None or x < self.min:
            self.min = x
        if self.max is None or x > self.max:
            self.max = x

    @property
    def variance(self) -> Optional[float]:
        """Sample (Bessel-corrected) variance, or None with fewer than 2 samples."""
        if self.count < 2:
            return None
        return self.m2 / (self.count - 1)

    @property
    def stddev(self) -> Optional[float]:
        """Sample standard deviation, or None with fewer than 2 samples."""
        variance = self.variance
        if variance is None:
            return None
        return math.sqrt(variance)

    def zscore(self, x: float) -> Optional[float]:
        """
        Distance of x from the current mean, in current standard deviations.

        Computed from the samples folded so far, so calling this BEFORE
        push(x) never lets a point judge itself.

        Returns:
            |x - mean| / stddev, or None when the stddev is undefined or zero.
        """
        stddev = self.stddev
        if stddev is None or stddev <= 0:
            return None
        return abs(x - self.mean) / stddev
