"""
Tests for the seed loader and the seed_data management command.
"""

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from campaigns.models import Campaign
from characters.models import Character
from core.seed_data import load_seed_data, seed_counts
from gear.models import Cybernetic, Gear, Item, Vehicle, Weapon


class LoadSeedDataTest(TestCase):
    def test_loads_every_record(self):
        counts = load_seed_data()

        self.assertEqual(counts, seed_counts())
        self.assertEqual(
            list(Campaign.objects.order_by("id").values_list("id", flat=True)),
            ["camp_1", "camp_2", "camp_3"],
        )
        self.assertEqual(Cybernetic.objects.count(), 1)
        self.assertEqual(Weapon.objects.count(), 2)
        self.assertEqual(Vehicle.objects.count(), 1)
        self.assertEqual(Item.objects.count(), 1)
        self.assertEqual(Character.objects.count(), 3)

    def test_catalog_comes_back_polymorphic(self):
        load_seed_data()

        katana = Gear.objects.get(pk="w_1")
        self.assertIsInstance(katana, Weapon)
        self.assertEqual(katana.weapon_type, "MELEE")

        booster = Cybernetic.objects.get(pk="cy_1")
        bonuses = list(booster.stat_bonuses.values_list("stat", "amount"))
        self.assertEqual(bonuses, [("REFLEXES", 1)])

    def test_nova_sheet(self):
        load_seed_data()

        nova = Character.objects.get(pk="c_1")
        self.assertEqual(nova.campaign_id, "camp_1")
        self.assertFalse(nova.is_public)
        self.assertEqual(nova.stats["reflexes"], 7)
        self.assertEqual(
            [(s.name, s.level) for s in nova.skills.all()],
            [("Hacking", 6), ("Awareness", 4)],
        )
        self.assertEqual([w.id for w in nova.weapons], ["w_1", "w_2"])
        self.assertEqual([c.id for c in nova.cybernetics], ["cy_1"])
        self.assertEqual([v.id for v in nova.vehicles], ["v_1"])
        self.assertEqual([i.id for i in nova.items], ["i_1"])

    def test_street_thug_is_public_without_campaign(self):
        load_seed_data()

        thug = Character.objects.get(pk="c_2")
        self.assertTrue(thug.is_public)
        self.assertIsNone(thug.campaign)
        self.assertEqual(thug.hit_points, 3)

    def test_loading_twice_does_not_duplicate(self):
        load_seed_data()
        Character.objects.filter(pk="c_1").update(name="Renamed")

        load_seed_data()

        self.assertEqual(Character.objects.count(), 3)
        self.assertEqual(Character.objects.get(pk="c_1").name, "Nova")
        self.assertEqual(Character.objects.get(pk="c_1").skills.count(), 2)
        self.assertEqual(Character.objects.get(pk="c_1").gear_links.count(), 5)


class SeedDataCommandTest(TestCase):
    def setUp(self):
        self.stdout = StringIO()

    def test_command_loads_seed_data(self):
        call_command("seed_data", stdout=self.stdout)

        output = self.stdout.getvalue()
        self.assertIn("✅ Seed data loaded successfully!", output)
        self.assertIn("Characters: 3", output)
        self.assertTrue(Character.objects.filter(pk="c_3").exists())

    def test_dry_run_writes_nothing(self):
        call_command("seed_data", "--dry-run", stdout=self.stdout)

        output = self.stdout.getvalue()
        self.assertIn("DRY RUN", output)
        self.assertIn("Campaigns: 3", output)
        self.assertEqual(Campaign.objects.count(), 0)
        self.assertEqual(Gear.objects.count(), 0)
