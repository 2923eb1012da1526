import unittest
from fastapi.testclient import TestClient
from kondate.api.api_run import app
from kondate.domain.Categories import Cuisine
from kondate.logic.menu.genre import genre_label


class TestMenuAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def _generate(self, **overrides):
        body = {"household_size": 2, "start_date": "2024-04-01", "end_date": "2024-04-03", "seed": 5}
        body.update(overrides)
        return self.client.post('/api/menu/generate', json=body)

    def _mains(self, plan):
        return {r['scheduled_date']: r for r in plan['recipes'] if r['category'] == 'main'}

    def test_catalog(self):
        resp = self.client.get('/api/catalog', params={'category': 'main', 'cuisine': 'chinese'})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['count'], len(data['items']))
        self.assertTrue(data['items'])
        for item in data['items']:
            self.assertEqual((item['category'], item['cuisine']), ('main', 'chinese'))
        self.assertEqual(self.client.get('/api/catalog', params={'category': 'dessert'}).status_code, 400)

    def test_generate(self):
        resp = self._generate()
        self.assertEqual(resp.status_code, 200)
        plan = resp.json()
        self.assertEqual((plan['start_date'], plan['end_date']), ('2024-04-01', '2024-04-03'))
        self.assertEqual(sorted(self._mains(plan)), ['2024-04-01', '2024-04-02', '2024-04-03'])
        self.assertEqual(self._mains(plan)['2024-04-01']['day'], '月曜日')

    def test_same_seed_same_menu(self):
        first = [r['name'] for r in self._generate().json()['recipes']]
        second = [r['name'] for r in self._generate().json()['recipes']]
        self.assertEqual(first, second)

    def test_generate_rejects_bad_input(self):
        self.assertEqual(self._generate(end_date="2024-03-30").status_code, 400)
        self.assertEqual(self._generate(household_size=0).status_code, 400)
        self.assertEqual(self._generate(cuisine_distribution={"japanese": 1}).status_code, 400)
        self.assertEqual(self.client.post('/api/menu/generate', json={"start_date": "2024-04-01"}).status_code, 422)

    def test_swap_days(self):
        plan = self._generate().json()
        resp = self.client.post('/api/menu/swap-days',
                                json={"plan": plan, "first": "2024-04-01", "second": "2024-04-03"})
        self.assertEqual(resp.status_code, 200)
        before, after = self._mains(plan), self._mains(resp.json())
        self.assertEqual(after['2024-04-01']['name'], before['2024-04-03']['name'])
        self.assertEqual(after['2024-04-03']['name'], before['2024-04-01']['name'])
        self.assertEqual(after['2024-04-02']['id'], before['2024-04-02']['id'])
        bad = self.client.post('/api/menu/swap-days',
                               json={"plan": plan, "first": "2024-04-01", "second": "2024-05-01"})
        self.assertEqual(bad.status_code, 400)

    def test_regenerate_day(self):
        plan = self._generate().json()
        resp = self.client.post('/api/menu/regenerate-day', json={
            "plan": plan, "day": "2024-04-02", "household_size": 2, "cuisine": "中華", "seed": 3,
        })
        self.assertEqual(resp.status_code, 200)
        before, after = self._mains(plan), self._mains(resp.json())
        self.assertIs(genre_label(after['2024-04-02']['name']), Cuisine.CHINESE)
        self.assertEqual(after['2024-04-01']['id'], before['2024-04-01']['id'])
        self.assertEqual(after['2024-04-03']['id'], before['2024-04-03']['id'])


class TestShoppingAndInventoryAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.plan = {
            "start_date": "2024-04-01",
            "end_date": "2024-04-02",
            "recipes": [
                {"name": "鶏の照り焼き", "category": "main", "scheduled_date": "2024-04-01", "ingredients": [
                    {"name": "鶏もも肉", "amount": 300, "unit": "g", "category": "肉・魚"},
                    {"name": "醤油", "amount": 30, "unit": "ml", "category": "調味料"}]},
                {"name": "麻婆豆腐", "category": "main", "scheduled_date": "2024-04-02", "ingredients": [
                    {"name": "醤油", "amount": 30, "unit": "ml", "category": "調味料"},
                    {"name": "ねぎ", "amount": 50, "unit": "g", "category": "野菜"}]},
            ],
        }
        cls.inventory = [
            {"name": "醤油", "amount": 100, "unit": "ml", "category": "調味料", "expiration_date": "2024-09-01"},
        ]

    def test_shopping_list(self):
        resp = self.client.post('/api/shopping-list', json={"plan": self.plan, "inventory": self.inventory})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['count'], 3)
        names = [it['ingredient']['name'] for it in data['items']]
        self.assertEqual(names, ["ねぎ", "鶏もも肉", "醤油"])
        soy = data['items'][2]
        self.assertEqual((soy['needed'], soy['in_stock'], soy['shortage']), (60, 100, 0))
        self.assertEqual([b['day'] for b in soy['breakdown']], ["月曜日", "火曜日"])

    def test_shopping_list_only_missing(self):
        resp = self.client.post('/api/shopping-list',
                                json={"plan": self.plan, "inventory": self.inventory, "only_missing": True})
        names = [it['ingredient']['name'] for it in resp.json()['items']]
        self.assertEqual(names, ["ねぎ", "鶏もも肉"])

    def test_shopping_list_for_generated_plan(self):
        plan = self.client.post('/api/menu/generate', json={
            "household_size": 4, "start_date": "2024-04-01", "end_date": "2024-04-07", "seed": 1}).json()
        resp = self.client.post('/api/shopping-list', json={"plan": plan})
        self.assertEqual(resp.status_code, 200)
        for it in resp.json()['items']:
            self.assertEqual(it['needed'], sum(b['amount'] for b in it['breakdown']))
            self.assertEqual(it['shortage'], it['needed'])

    def test_shopping_list_pdf(self):
        resp = self.client.post('/api/shopping-list/pdf', json={"plan": self.plan})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['content-type'], 'application/pdf')
        self.assertIn('shopping_list_2024-04-01.pdf', resp.headers['content-disposition'])
        self.assertTrue(resp.content.startswith(b'%PDF'))

    def test_cooked(self):
        resp = self.client.post('/api/inventory/cooked', json={
            "inventory": [
                {"id": "inv-1", "name": "鶏もも肉", "amount": 500, "unit": "g", "category": "肉・魚",
                 "expiration_date": "2024-04-05"},
                {"id": "inv-2", "name": "醤油", "amount": 20, "unit": "ml", "category": "調味料",
                 "expiration_date": "2024-09-01"},
            ],
            "recipes": [self.plan["recipes"][0]],
        })
        self.assertEqual(resp.status_code, 200)
        items = resp.json()['items']
        self.assertEqual([(i['id'], i['amount']) for i in items], [("inv-1", 200)])

    def test_purchase(self):
        resp = self.client.post('/api/inventory/purchase', json={
            "inventory": self.inventory,
            "purchases": [
                {"name": "キャベツ", "amount": 1, "unit": "個", "category": "野菜"},
                {"name": "醤油", "amount": 500, "unit": "ml", "category": "調味料"},
            ],
            "today": "2024-04-01",
        })
        self.assertEqual(resp.status_code, 200)
        items = {i['name']: i for i in resp.json()['items']}
        self.assertEqual(items['醤油']['amount'], 600)
        self.assertEqual(items['醤油']['expiration_date'], "2024-09-01")
        self.assertEqual(items['キャベツ']['expiration_date'], "2024-04-08")
        self.assertEqual(items['キャベツ']['added_date'], "2024-04-01")

    def test_purchase_rejects_non_positive_amounts(self):
        resp = self.client.post('/api/inventory/purchase', json={
            "purchases": [{"name": "キャベツ", "amount": 0, "unit": "個", "category": "野菜"}]})
        self.assertEqual(resp.status_code, 422)


class TestRemoteAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_unconfigured_remote(self):
        resp = self.client.post('/api/remote/test', json={"api_endpoint": "", "api_key": ""})
        self.assertEqual(resp.status_code, 200)
        self.assertFalse(resp.json()['success'])

    def test_rejects_non_http_endpoint(self):
        resp = self.client.post('/api/remote/test', json={"api_endpoint": "ftp://example", "api_key": "k"})
        self.assertEqual(resp.status_code, 422)
