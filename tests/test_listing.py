from datetime import datetime, timedelta, timezone
from app.utils.file_utils import build_thumbnail_url, name_sort_key, utc_isoformat


def test_lists_folders_and_files_sorted_by_name(drive, tree):
    tree.folder('Zebra')
    tree.folder('apple')
    tree.folder('Mango')
    tree.file('b-report.pdf')
    tree.file('A-notes.pdf')

    result = drive.listing.list_contents()

    assert result['success'] is True
    assert [f['name'] for f in result['folders']] == ['apple', 'Mango', 'Zebra']
    assert [f['name'] for f in result['files']] == ['A-notes.pdf', 'b-report.pdf']
    assert result['currentFolder'] == {'id': 'root', 'name': 'Multimedia'}
    assert result['folderPath'] == [{'id': 'root', 'name': 'Multimedia'}]


def test_has_subfolders_flag(drive, tree):
    parent = tree.folder('Parent')
    tree.folder('Child', parent=parent)
    tree.folder('Empty')

    folders = {f['name']: f for f in drive.listing.list_contents('root')['folders']}

    assert folders['Parent']['hasSubfolders'] is True
    assert folders['Empty']['hasSubfolders'] is False
    assert folders['Parent']['id'] == parent


def test_file_metadata_and_thumbnails(drive, tree):
    photo = tree.file('photo.png', mime_type='image/png', size=512)
    clip = tree.file('clip.mp4', mime_type='video/mp4')
    tree.file('paper.pdf', mime_type='application/pdf')

    files = {f['name']: f for f in drive.listing.list_contents()['files']}

    assert files['photo.png']['thumbnailUrl'] == f'http://files.test/thumbnail?id={photo}&sz=w400'
    assert files['clip.mp4']['thumbnailUrl'] == f'http://files.test/thumbnail?id={clip}&sz=w400'
    assert files['paper.pdf']['thumbnailUrl'] is None

    assert files['photo.png']['mimeType'] == 'image/png'
    assert files['photo.png']['size'] == 512
    assert files['photo.png']['url'] == f'http://files.test/files/raw/{photo}'
    modified = datetime.fromisoformat(files['photo.png']['lastModified'])
    assert modified.utcoffset() == timedelta(0)


def test_files_carry_their_remarks(drive, tree):
    noted = tree.file('noted.pdf')
    tree.file('plain.pdf')
    drive.remarks_store.upsert(noted, 'noted.pdf', 'application/pdf', 'root', 'Multimedia', 'signed copy')

    files = {f['name']: f for f in drive.listing.list_contents()['files']}

    assert files['noted.pdf']['remarks'] == 'signed copy'
    assert files['plain.pdf']['remarks'] == ''


def test_listing_a_subfolder_includes_its_path(drive, tree):
    photos = tree.folder('Photos')
    trips = tree.folder('Trips', parent=photos)
    tree.file('beach.jpg', parent=trips, mime_type='image/jpeg')

    result = drive.listing.list_contents(trips)

    assert result['currentFolder'] == {'id': trips, 'name': 'Trips'}
    assert [p['name'] for p in result['folderPath']] == ['Multimedia', 'Photos', 'Trips']
    assert [f['name'] for f in result['files']] == ['beach.jpg']
    assert result['folders'] == []


def test_listing_unknown_folder_reports_failure(drive):
    result = drive.listing.list_contents('missing')

    assert result['success'] is False
    assert 'missing' in result['error']
    assert result['folders'] == []
    assert result['files'] == []
    assert result['folderPath'] == []


def test_created_folder_shows_up_in_listing(drive):
    created = drive.folders.create_folder('Drafts')

    assert created['success'] is True
    assert created['folder']['name'] == 'Drafts'
    assert created['folder']['hasSubfolders'] is False

    folders = drive.listing.list_contents()['folders']
    assert {'id': created['folder']['id'], 'name': 'Drafts', 'hasSubfolders': False} in folders


def test_root_info(drive):
    assert drive.listing.root_info() == {
        'success': True,
        'name': 'Multimedia',
        'id': 'root',
        'url': 'http://files.test/?folder=root',
    }


def test_root_info_with_invalid_root(drive):
    drive.listing.root_id = 'gone'

    result = drive.listing.root_info()

    assert result['success'] is False
    assert 'ROOT_FOLDER_ID' in result['error']


def test_thumbnail_url_only_for_media():
    assert build_thumbnail_url('/thumbnail', 'abc', 'image/gif') == '/thumbnail?id=abc&sz=w400'
    assert build_thumbnail_url('/thumbnail', 'abc', 'video/webm', 200) == '/thumbnail?id=abc&sz=w200'
    assert build_thumbnail_url('/thumbnail', 'abc', 'application/pdf') is None
    assert build_thumbnail_url('/thumbnail', 'abc', '') is None


def test_name_sort_key_ignores_case_and_accents():
    names = ['zeta', 'Éclair', 'alpha', 'Beta']

    assert sorted(names, key=name_sort_key) == ['alpha', 'Beta', 'Éclair', 'zeta']


def test_timestamps_are_reported_in_utc():
    assert utc_isoformat(datetime(2024, 5, 1, 8, 30)) == '2024-05-01T08:30:00+00:00'
    assert utc_isoformat(datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)) == '2024-05-01T08:30:00+00:00'
    assert utc_isoformat(None) is None
