import json
import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from greenroute.data_store import DatasetStore
from greenroute.exceptions import ValidationError


class TestDatasetStore(unittest.TestCase):
    def setUp(self):
        self.store = DatasetStore([{'supplier': 'A', 'score': 80}])
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, name, content):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def test_get_returns_copy(self):
        records = self.store.get()
        records.append({'supplier': 'B'})
        self.assertEqual(len(self.store.get()), 1)

    def test_set_notifies_subscribers(self):
        first, second = MagicMock(), MagicMock()
        self.store.subscribe(first)
        self.store.subscribe(second)
        new_records = [{'supplier': 'B', 'score': 55}]
        self.store.set(new_records)
        first.assert_called_once_with(new_records)
        second.assert_called_once_with(new_records)
        self.assertEqual(self.store.get(), new_records)

    def test_unsubscribe(self):
        callback = MagicMock()
        unsubscribe = self.store.subscribe(callback)
        unsubscribe()
        unsubscribe()
        self.store.set([])
        callback.assert_not_called()

    def test_load_csv(self):
        path = self._write('suppliers.csv', "supplier, emissions, region\nAcme, 120.5, North\nGlobex,, South\n")
        callback = MagicMock()
        self.store.subscribe(callback)

        records = self.store.load(path)
        self.assertEqual(len(records), 2)
        self.assertEqual(records[0]['supplier'], 'Acme')
        self.assertAlmostEqual(records[0]['emissions'], 120.5)
        self.assertIsNone(records[1]['emissions'])
        self.assertEqual(records[1]['region'], 'South')
        callback.assert_called_once_with(records)
        self.assertEqual(self.store.get(), records)

    def test_load_json(self):
        data = [{'supplier': 'Acme', 'score': 91}, {'supplier': 'Initech', 'score': 64}]
        path = self._write('suppliers.json', json.dumps(data))
        records = self.store.load(path)
        self.assertEqual(records, data)
        self.assertEqual(list(self.store.to_frame().columns), ['supplier', 'score'])

    def test_load_json_keeps_date_strings(self):
        data = [{'supplier': 'Acme', 'updated_at': '2024-03-10', 'date': '2024-03-11'}]
        path = self._write('suppliers.json', json.dumps(data))
        records = self.store.load(path)
        self.assertEqual(records[0]['updated_at'], '2024-03-10')
        self.assertEqual(records[0]['date'], '2024-03-11')

    def test_load_uses_configured_dataset(self):
        data = [{'supplier': 'Globex', 'score': 72}]
        path = self._write('default.json', json.dumps(data))
        with patch('greenroute.config.DEFAULT_DATASET', path):
            records = self.store.load()
        self.assertEqual(records, data)
        self.assertEqual(self.store.get(), data)

    def test_load_without_path_or_configured_dataset(self):
        with patch('greenroute.config.DEFAULT_DATASET', None):
            with self.assertRaises(ValidationError) as ctx:
                self.store.load()
        self.assertEqual(ctx.exception.field, 'file')
        self.assertEqual(len(self.store.get()), 1)

    def test_unsupported_format(self):
        path = self._write('suppliers.xlsx', 'binary')
        with self.assertRaises(ValidationError) as ctx:
            self.store.load(path)
        self.assertEqual(ctx.exception.field, 'file')
        self.assertEqual(len(self.store.get()), 1)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            self.store.load(os.path.join(self.tmpdir.name, 'missing.csv'))

    def test_malformed_json(self):
        path = self._write('broken.json', '{not json')
        with self.assertRaises(ValidationError):
            self.store.load(path)
        self.assertEqual(self.store.get(), [{'supplier': 'A', 'score': 80}])


if __name__ == '__main__':
    unittest.main()
