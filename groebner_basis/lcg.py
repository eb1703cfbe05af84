"""Linear congruential generator for reproducible test inputs."""


class LCG:
    """x_{k+1} = (multiplier * x_k + increment) mod modulus."""

    def __init__(self, seed, modulus, multiplier, increment):
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        self.last = seed
        self.modulus = modulus
        self.multiplier = multiplier
        self.increment = increment

    def next_int(self):
        self.last = (self.multiplier * self.last + self.increment) % self.modulus
        return self.last

    def next_double(self):
        """Next value scaled into [0, 1)."""
        return self.next_int() / self.modulus


def default_lcg():
    """Generator used by the random benchmark systems."""
    return LCG(12345, 1345, 65, 17)
