class ScriptedSource:
    """Deterministic stand-in for SecureRandomSource; replays `values` then repeats 0."""

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = 0

    def random_byte(self):
        return self.randbelow(256)

    def randbelow(self, n):
        self.calls += 1
        v = self.values.pop(0) if self.values else 0
        return v % n

    def choice(self, seq):
        return seq[self.randbelow(len(seq))]
