# Unit RGB → unit HSL / HSV, all channels as [0, 1] fractions
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (1 / 3, 1.0, 0.5),
    (0.0, 0.0, 1.0): (2 / 3, 1.0, 0.5),
    (1.0, 1.0, 0.0): (1 / 6, 1.0, 0.5),
    (0.0, 1.0, 1.0): (0.5, 1.0, 0.5),
    (1.0, 0.0, 1.0): (5 / 6, 1.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.5, 0.0): (1 / 12, 1.0, 0.5),
    (0.2, 0.4, 0.6): (7 / 12, 0.5, 0.4),
    (0.8, 0.6, 0.4): (1 / 12, 0.5, 0.6),
}

samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (1 / 3, 1.0, 1.0),
    (0.0, 0.0, 1.0): (2 / 3, 1.0, 1.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.5, 0.0): (1 / 12, 1.0, 1.0),
    (1.0, 0.0, 0.5): (11 / 12, 1.0, 1.0),
    (0.2, 0.4, 0.6): (7 / 12, 2 / 3, 0.6),
    (0.8, 0.6, 0.4): (1 / 12, 0.5, 0.8),
}

# Every 17th channel value, 0..255 inclusive
channel_grid = list(range(0, 256, 17))
