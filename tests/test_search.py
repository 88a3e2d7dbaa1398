from app.services.search import SearchService
from app.storage.base import StorageError


def test_matches_are_case_insensitive_substrings(drive, tree):
    reports = tree.folder('Reports')
    tree.folder('reprint', parent=reports)
    tree.file('Report.pdf', parent=reports)
    tree.file('document.pdf')

    result = drive.search.search('rep')

    assert result['success'] is True
    assert result['query'] == 'rep'
    assert result['limited'] is False
    assert sorted(f['name'] for f in result['results']['folders']) == ['Reports', 'reprint']
    assert [f['name'] for f in result['results']['files']] == ['Report.pdf']


def test_matches_carry_breadcrumb_paths(drive, tree):
    photos = tree.folder('Photos')
    trips = tree.folder('Trips', parent=photos)
    beach = tree.file('beach.jpg', parent=trips, mime_type='image/jpeg')
    tree.folder('Beach days', parent=trips)

    result = drive.search.search('beach')

    folders = result['results']['folders']
    files = result['results']['files']
    assert folders == [{
        'id': folders[0]['id'],
        'name': 'Beach days',
        'path': 'Multimedia > Photos > Trips > Beach days',
        'hasSubfolders': False,
    }]
    assert files[0]['id'] == beach
    assert files[0]['path'] == 'Multimedia > Photos > Trips'
    assert files[0]['thumbnailUrl'] == f'http://files.test/thumbnail?id={beach}&sz=w400'


def test_folders_are_searched_before_files(drive, tree):
    nested = tree.folder('nested')
    tree.file('nested-file.txt', parent=nested, mime_type='text/plain')
    tree.file('top-nested.txt', mime_type='text/plain')

    files = drive.search.search('nested')['results']['files']

    assert [f['name'] for f in files] == ['nested-file.txt', 'top-nested.txt']


def test_search_starts_from_given_folder(drive, tree):
    inside = tree.folder('Inside')
    tree.file('match-inside.pdf', parent=inside)
    tree.file('match-outside.pdf')

    result = drive.search.search('match', inside)

    assert [f['name'] for f in result['results']['files']] == ['match-inside.pdf']
    assert result['results']['files'][0]['path'] == 'Inside'


def test_search_joins_remarks(drive, tree):
    file_id = tree.file('invoice.pdf')
    drive.remarks_store.upsert(file_id, 'invoice.pdf', 'application/pdf', 'root', 'Multimedia', 'paid')

    files = drive.search.search('invoice')['results']['files']

    assert files[0]['remarks'] == 'paid'


def test_result_count_is_capped(drive, tree):
    for number in range(60):
        tree.file(f'scan-{number:02}.png', mime_type='image/png')

    result = drive.search.search('scan')

    assert result['limited'] is True
    assert len(result['results']['files']) == 50


def test_limited_flag_tracks_cap(drive, tree):
    for number in range(49):
        tree.file(f'scan-{number:02}.png', mime_type='image/png')

    assert drive.search.search('scan')['limited'] is False

    tree.file('scan-49.png', mime_type='image/png')
    tree.file('scan-50.png', mime_type='image/png')
    result = drive.search.search('scan')

    assert result['limited'] is True
    assert len(result['results']['files']) == 50


def test_cap_stops_descending(provider, drive, tree):
    deep = tree.folder('deep-a')
    tree.folder('deep-b', parent=deep)
    service = SearchService(provider, drive.remarks_cache, 'root', '/thumbnail', max_results=1)

    result = service.search('deep')

    assert [f['name'] for f in result['results']['folders']] == ['deep-a']
    assert result['limited'] is True


def test_failing_subtree_does_not_abort_siblings(monkeypatch, provider, drive, tree):
    broken = tree.folder('broken')
    tree.file('lost-match.pdf', parent=broken)
    healthy = tree.folder('healthy')
    tree.file('kept-match.pdf', parent=healthy)

    original = provider.list_folders

    def list_folders(folder_id):
        if folder_id == broken:
            raise StorageError('permission denied')
        return original(folder_id)

    monkeypatch.setattr(provider, 'list_folders', list_folders)

    result = drive.search.search('match')

    assert result['success'] is True
    assert [f['name'] for f in result['results']['files']] == ['kept-match.pdf']


def test_cyclic_folders_are_visited_once(provider, drive, tree):
    a = tree.folder('loop-a')
    b = tree.folder('loop-b', parent=a)
    provider.add_parent(a, b)

    result = drive.search.search('loop')

    assert sorted(f['name'] for f in result['results']['folders']) == ['loop-a', 'loop-a', 'loop-b']
    assert result['limited'] is False


def test_search_from_unknown_folder_fails(drive):
    result = drive.search.search('x', 'missing')

    assert result['success'] is False
    assert result['results'] == {'folders': [], 'files': []}
