import unittest
from kondate.domain.Categories import Cuisine
from kondate.logic.menu.distribution import assign_genres, default_distribution
from kondate.utilities.random_source import PythonRandomSource


class TestCuisineDistribution(unittest.TestCase):

    def test_default_split(self):
        self.assertEqual(default_distribution(10),
                         {Cuisine.JAPANESE: 4, Cuisine.WESTERN: 3, Cuisine.CHINESE: 3})
        self.assertEqual(default_distribution(7),
                         {Cuisine.JAPANESE: 3, Cuisine.WESTERN: 3, Cuisine.CHINESE: 2})
        self.assertEqual(default_distribution(1),
                         {Cuisine.JAPANESE: 1, Cuisine.WESTERN: 1, Cuisine.CHINESE: 0})

    def test_default_assignment_has_one_genre_per_day(self):
        for days in (1, 2, 3, 7, 14, 30):
            genres = assign_genres(days, PythonRandomSource(days))
            self.assertEqual(len(genres), days)

    def test_explicit_distribution_is_kept_exactly(self):
        wanted = {Cuisine.JAPANESE: 2, Cuisine.WESTERN: 4, Cuisine.CHINESE: 1}
        genres = assign_genres(7, PythonRandomSource(3), wanted)
        self.assertEqual({c: genres.count(c) for c in Cuisine}, wanted)

    def test_shuffle_varies_with_seed(self):
        wanted = {Cuisine.JAPANESE: 5, Cuisine.WESTERN: 5, Cuisine.CHINESE: 5}
        orders = {tuple(assign_genres(15, PythonRandomSource(seed), wanted)) for seed in range(5)}
        self.assertGreater(len(orders), 1)
