from .synthetic import toronto_crime, toronto_crime_features
