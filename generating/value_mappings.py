from faker import Faker
from fuzzywuzzy import fuzz, process

# Faker providers that return plain text suitable for varchar columns.
TEXT_PROVIDERS = [
    'name', 'first_name', 'last_name', 'email', 'company_email', 'free_email',
    'user_name', 'phone_number', 'address', 'street_address', 'city', 'country',
    'postcode', 'company', 'job', 'url', 'domain_name', 'color_name', 'word',
    'catch_phrase', 'isbn13', 'license_plate', 'currency_code',
]


class ColumnMappingsGenerator:
    """
    Builds column_type_mappings for SqlGenerator by fuzzy-matching varchar column
    names (e.g. 'customer_email') against text-producing Faker providers ('email').
    Values are truncated to the column length.
    """

    def __init__(self, threshold=80):
        """
        Args:
            threshold (int): Minimum fuzzywuzzy score to accept a match.
        """
        self.fake = Faker()
        self.threshold = threshold
        self.faker_methods = [m for m in TEXT_PROVIDERS if callable(getattr(self.fake, m, None))]

    def generate(self, tables) -> dict:
        """
        Given an iterable of Table objects, return a dictionary like:
            {
              'customers': {
                'customer_email': <lambda fake, row: ...>,
                'customer_name':  <lambda fake, row: ...>,
              },
              ...
            }
        Tables with no matched column are left out.
        """
        mappings = {}
        for table in tables:
            col_map = {}
            for column in table.columns:
                if column.column_type != 'varchar':
                    continue
                guess_method = self._fuzzy_guess_faker_method(column.name)
                if guess_method is not None:
                    col_map[column.name] = self._wrap_faker_call(guess_method, column.length)
            if col_map:
                mappings[table.name] = col_map
        return mappings

    def _fuzzy_guess_faker_method(self, col_name: str):
        """
        Pick the best faker method for a column name, or None if no match is good enough.
        """
        if not self.faker_methods:
            return None

        best_match, score = process.extractOne(
            col_name, self.faker_methods, scorer=fuzz.WRatio
        )
        if score >= self.threshold:
            return best_match
        return None

    @staticmethod
    def _wrap_faker_call(method_name: str, length):
        def generator(fake: Faker, row: dict):
            val = str(getattr(fake, method_name)()).replace('\n', ' ')
            if length is not None:
                val = val[:length]
            return val

        generator.faker_method = method_name
        return generator
