from django.test import SimpleTestCase

from users.validators import MAX_EMAIL_LENGTH, is_valid_email


class IsValidEmailTest(SimpleTestCase):
    def test_valid(self):
        for email in ["a@b.co", "runner.one+tag@night-city.example"]:
            with self.subTest(email=email):
                self.assertTrue(is_valid_email(email))

    def test_invalid(self):
        for email in ["", "plain", "a@b", "a b@c.d", "@b.co", "a@.", None]:
            with self.subTest(email=email):
                self.assertFalse(is_valid_email(email))

    def test_length_limit(self):
        domain = "@night-city.example"
        longest = "a" * (MAX_EMAIL_LENGTH - len(domain)) + domain

        self.assertTrue(is_valid_email(longest))
        self.assertFalse(is_valid_email("a" + longest))
