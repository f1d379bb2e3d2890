import shutil
import tempfile

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from rest_framework import status

from core.base.test_utils import APITestBase
from core.media_library.models import Media, MediaType

PNG_BYTES = (
    b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01'
    b'\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f'
    b'\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82'
)


def png_file(name='logo.png'):
    return SimpleUploadedFile(name, PNG_BYTES, content_type='image/png')


class MediaLibraryTest(APITestBase):
    def setUp(self):
        super().setUp()
        self.media_root = tempfile.mkdtemp()
        self.override = override_settings(MEDIA_ROOT=self.media_root)
        self.override.enable()
        self.login_as(self.admin)

    def tearDown(self):
        self.override.disable()
        shutil.rmtree(self.media_root, ignore_errors=True)
        super().tearDown()

    def upload(self, *files):
        return self.client.post('/admin/media/upload/', {'files': list(files)}, format='multipart')

    def test_upload_image(self):
        response = self.upload(png_file())

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        uploaded = response.data['data']['uploaded']
        self.assertEqual(len(uploaded), 1)
        self.assertEqual(uploaded[0]['name'], 'logo.png')
        self.assertEqual(uploaded[0]['type'], MediaType.IMAGE)
        self.assertTrue(uploaded[0]['url'].startswith('/uploads/'))

        media = Media.objects.get()
        self.assertNotEqual(media.file_path, 'logo.png')
        self.assertTrue(media.file_path.endswith('.png'))
        self.assertTrue(default_storage.exists(media.file_path))

    def test_disallowed_type_is_rejected(self):
        script = SimpleUploadedFile('run.sh', b'echo hi', content_type='application/x-sh')

        response = self.upload(script)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        rejected = response.data['data']['rejected']
        self.assertEqual(rejected[0]['name'], 'run.sh')
        self.assertIn('not allowed', rejected[0]['reason'])
        self.assertFalse(Media.objects.exists())

    def test_mixed_upload_keeps_valid_files(self):
        script = SimpleUploadedFile('run.sh', b'echo hi', content_type='application/x-sh')

        response = self.upload(png_file(), script)

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(len(response.data['data']['uploaded']), 1)
        self.assertEqual(len(response.data['data']['rejected']), 1)

    @override_settings(UPLOAD_MAX_FILE_SIZE=10)
    def test_oversized_file_is_rejected(self):
        response = self.upload(png_file())

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('maximum size', response.data['data']['rejected'][0]['reason'])

    def test_upload_without_files(self):
        response = self.client.post('/admin/media/upload/', {}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'No file provided')

    def test_list_filters_by_type(self):
        self.upload(png_file())
        pdf = SimpleUploadedFile('minutes.pdf', b'%PDF-1.4', content_type='application/pdf')
        self.upload(pdf)

        response = self.client.get('/admin/media/', {'type': 'document'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [m['name'] for m in self.results(response)]
        self.assertEqual(names, ['minutes.pdf'])

    def test_update_alt_and_delete(self):
        self.upload(png_file())
        media = Media.objects.get()

        response = self.client.patch(f'/admin/media/{media.pk}/', {'alt': 'Association logo'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['alt'], 'Association logo')

        response = self.client.delete(f'/admin/media/{media.pk}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Media.objects.exists())
        self.assertFalse(default_storage.exists(media.file_path))

    def test_delete_unknown_media(self):
        response = self.client.delete('/admin/media/999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_member_cannot_upload(self):
        self.login_as(self.member)

        response = self.upload(png_file())

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertFalse(Media.objects.exists())
