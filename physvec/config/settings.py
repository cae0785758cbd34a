from pathlib import Path

### Equality / hashing ###
HASH_SEED = 1
HASH_PRIME = 31  # multiplicative mixing constant applied per component
CANONICAL_NAN_BITS = 0x7FF8000000000000  # every NaN hashes and compares as this pattern

### Angles ###
COSINE_MIN = -1.0
COSINE_MAX = 1.0

### Harmonic oscillator defaults ###
OSCILLATOR_LENGTH = 10.0  # free length of the spring
OSCILLATOR_MASS = 5.0
OSCILLATOR_STIFFNESS = 3.0
OSCILLATOR_INITIAL_DISPLACEMENT = 2.0
OSCILLATOR_STEP = 0.0001  # seconds
OSCILLATOR_STEPS = 100_000

TRACE_BASE_PATH = Path.cwd() / "traces"

### Benchmark ###
BENCHMARK_NUMBER = 100_000  # timeit iterations per implementation
BENCHMARK_REPEAT = 5
