# core/constants.py

# Minimum distance for secondary and shadow rays, keeps a surface from
# re-hitting itself at the origin of a ray it spawned.
EPSILON = 1e-6

INDEX_OF_REFRACTION_VACUUM = 1.0
INDEX_OF_REFRACTION_AIR = 1.000293
INDEX_OF_REFRACTION_ICE = 1.31
INDEX_OF_REFRACTION_WATER = 1.33
INDEX_OF_REFRACTION_GLASS = 1.52
INDEX_OF_REFRACTION_SAPPHIRE = 1.77
INDEX_OF_REFRACTION_DIAMOND = 2.42

DEFAULT_MAX_DEPTH = 5
