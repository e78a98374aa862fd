from liquidsort.engine.gamerandom.rng import SeededRandom, next_random, shuffle

__all__ = ["SeededRandom", "next_random", "shuffle"]
