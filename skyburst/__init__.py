"""
Skyburst
Particle fireworks show driven by a scripted launch battery.

Features:
- Rockets with spark trails and randomized apex heights
- Radial bursts with optional sparkles and star pops
- Upward fountains
- JSON battery script validated at load time
"""
