import os
from unittest import mock

from PIL import Image
from django.test import TestCase
from django.utils.datastructures import MultiValueDict

from website.models import Category, Product, ProductImage
from website.product import (
    FEATURE_PHOTO_HTML,
    append_feature_photos,
    fill_english,
    reconcile_main_image,
    resolve_category_en,
    save_product,
)
from website.utilities import media_path

from .utils import AdminClientMixin, TempMediaMixin, make_image


class FillEnglishTests(TestCase):
    @mock.patch("website.product.safe_translate")
    def test_explicit_english_is_kept_verbatim(self, translate):
        self.assertEqual(fill_english("高速主轴", "  High Speed Spindle\n"), "  High Speed Spindle\n")
        translate.assert_not_called()

    @mock.patch("website.product.safe_translate", return_value="Spindle")
    def test_whitespace_only_english_counts_as_blank(self, translate):
        self.assertEqual(fill_english("主轴", "   "), "Spindle")
        translate.assert_called_once_with("主轴")

    @mock.patch("website.product.safe_translate", return_value="High precision lathe")
    def test_native_text_is_translated(self, translate):
        self.assertEqual(fill_english("高精度车床", ""), "High precision lathe")
        translate.assert_called_once_with("高精度车床")

    @mock.patch("website.product.safe_translate")
    def test_blank_native_keeps_stored_value(self, translate):
        self.assertEqual(fill_english("", "", stored="Old text"), "Old text")
        self.assertEqual(fill_english(None, None), "")
        translate.assert_not_called()


class CategoryEnglishTests(TestCase):
    @mock.patch("website.product.safe_translate")
    def test_existing_category_translation_is_reused(self, translate):
        Category.objects.create(name="车床系列", name_en="Lathes")
        self.assertEqual(resolve_category_en("车床系列", ""), "Lathes")
        translate.assert_not_called()

    @mock.patch("website.product.safe_translate", return_value="Welding")
    def test_unknown_category_is_translated(self, translate):
        Category.objects.create(name="焊接设备", name_en="")
        self.assertEqual(resolve_category_en("焊接设备", None), "Welding")
        translate.assert_called_once_with("焊接设备")

    @mock.patch("website.product.safe_translate")
    def test_explicit_category_english_wins(self, translate):
        Category.objects.create(name="车床系列", name_en="Lathes")
        self.assertEqual(resolve_category_en("车床系列", " Turning "), " Turning ")
        translate.assert_not_called()


class FeaturePhotoTests(TestCase):
    def test_photos_are_appended_as_html(self):
        features = append_feature_photos("高速主轴", ["/images/1.png", "/images/2.png"])
        self.assertEqual(
            features,
            "高速主轴"
            + FEATURE_PHOTO_HTML.format(src="/images/1.png")
            + FEATURE_PHOTO_HTML.format(src="/images/2.png"),
        )

    def test_no_photos_leaves_text_alone(self):
        self.assertEqual(append_feature_photos("text", []), "text")
        self.assertEqual(append_feature_photos(None, []), "")


class ReconcileMainImageTests(TestCase):
    def test_row_matching_product_image_is_kept(self):
        product = Product.objects.create(name="液压机", category="冲压设备", image="/images/b.png")
        ProductImage.objects.create(product=product, image="/images/a.png", is_main=True)
        keep = ProductImage.objects.create(product=product, image="/images/b.png", is_main=True)
        ProductImage.objects.create(product=product, image="/images/c.png", is_main=True)
        gallery = ProductImage.objects.create(product=product, image="/images/g.png", is_main=False)

        self.assertEqual(reconcile_main_image(product), keep)
        self.assertEqual(list(product.images.filter(is_main=True)), [keep])
        self.assertTrue(ProductImage.objects.filter(pk=gallery.pk).exists())

    def test_newest_main_kept_when_nothing_matches(self):
        product = Product.objects.create(name="液压机", category="冲压设备", image="/images/x.png")
        ProductImage.objects.create(product=product, image="/images/a.png", is_main=True)
        newest = ProductImage.objects.create(product=product, image="/images/b.png", is_main=True)
        self.assertEqual(reconcile_main_image(product), newest)
        self.assertEqual(product.images.filter(is_main=True).count(), 1)

    def test_no_main_rows(self):
        product = Product.objects.create(name="液压机", category="冲压设备")
        self.assertIsNone(reconcile_main_image(product))


@mock.patch("website.product.safe_translate", side_effect=lambda text, *a, **kw: f"EN:{text}")
class SaveProductTests(TempMediaMixin, TestCase):
    def test_missing_english_fields_are_translated(self, translate):
        product = save_product(
            {"name": "工业机械臂", "category": "自动化设备", "description": "6轴机械臂", "features": "高负载"},
            MultiValueDict(),
        )
        product.refresh_from_db()
        self.assertEqual(product.name_en, "EN:工业机械臂")
        self.assertEqual(product.category_en, "EN:自动化设备")
        self.assertEqual(product.description_en, "EN:6轴机械臂")
        self.assertEqual(product.features_en, "EN:高负载")

    def test_uploads_are_stored_by_type(self, translate):
        files = MultiValueDict({
            "image": [make_image("main.png")],
            "gallery": [make_image("g1.png"), make_image("g2.png")],
            "features_photos": [make_image("f.png")],
        })
        product = save_product(
            {"name": "液压机", "name_en": "Press", "category": "冲压设备", "category_en": "Presses",
             "features": "精确", "features_en": "Precise", "description": "", "video_url": ""},
            files,
        )
        self.assertTrue(product.image.startswith("/images/"))
        self.assertTrue(os.path.exists(media_path(product.image)))
        self.assertEqual(list(product.images.filter(is_main=True).values_list("image", flat=True)), [product.image])
        self.assertEqual(product.images.filter(is_main=False).count(), 2)
        self.assertIn('<p><img src="/images/', product.features)
        self.assertTrue(product.features.startswith("精确"))

    def test_main_image_resized_on_upload(self, translate):
        files = MultiValueDict({"image": [make_image("main.png", size=(400, 300))]})
        product = save_product(
            {"name": "车床", "name_en": "Lathe", "category": "车床系列", "category_en": "Lathes",
             "target_width": "120", "target_height": "120"},
            files,
        )
        with Image.open(media_path(product.image)) as img:
            self.assertEqual(img.size, (120, 120))

    def test_edit_with_new_image_leaves_single_main(self, translate):
        product = save_product(
            {"name": "车床", "name_en": "Lathe", "category": "车床系列", "category_en": "Lathes"},
            MultiValueDict({"image": [make_image("first.png")]}),
        )
        first_image = product.image

        product = save_product(
            {"name": "车床 V2", "name_en": "Lathe V2", "category": "车床系列", "category_en": "Lathes"},
            MultiValueDict({"image": [make_image("second.png")]}),
            existing_product=Product.objects.get(pk=product.pk),
        )
        product.refresh_from_db()
        mains = list(product.images.filter(is_main=True))
        self.assertEqual(len(mains), 1)
        self.assertEqual(mains[0].image, product.image)
        self.assertNotEqual(product.image, first_image)
        self.assertEqual(product.name, "车床 V2")

    def test_edit_without_video_url_field_clears_nothing(self, translate):
        product = Product.objects.create(
            name="车床", name_en="Lathe", category="车床系列", category_en="Lathes",
            video_url="https://example.com/v",
        )
        save_product({"name": "车床", "category": "车床系列", "name_en": "Lathe"}, MultiValueDict(), product)
        product.refresh_from_db()
        self.assertEqual(product.video_url, "https://example.com/v")

        save_product({"name": "车床", "category": "车床系列", "name_en": "Lathe", "video_url": ""},
                     MultiValueDict(), product)
        product.refresh_from_db()
        self.assertIsNone(product.video_url)

    def test_edit_keeps_stored_english_when_native_blank(self, translate):
        product = Product.objects.create(
            name="车床", name_en="Lathe", category="车床系列", category_en="Lathes",
            description="", description_en="Kept",
        )
        save_product({"name": "车床", "category": "车床系列", "name_en": "Lathe", "description": ""},
                     MultiValueDict(), product)
        product.refresh_from_db()
        self.assertEqual(product.description_en, "Kept")

    def test_edit_stores_explicit_description_en_unchanged(self, translate):
        product = Product.objects.create(
            name="车床", name_en="Lathe", category="车床系列", category_en="Lathes",
            description="旧描述", description_en="Old",
        )
        save_product({
            "name": "车床", "category": "车床系列", "name_en": "Lathe", "category_en": "Lathes",
            "description": "新描述", "description_en": "  Line one\nLine two\n",
        }, MultiValueDict(), product)
        product.refresh_from_db()
        self.assertEqual(product.description_en, "  Line one\nLine two\n")
        translate.assert_not_called()


class SaveProductTranslationTests(TestCase):
    @mock.patch("website.product.safe_translate")
    def test_category_english_taken_from_existing_category(self, translate):
        Category.objects.create(name="车床系列", name_en="Lathes")
        product = save_product(
            {"name": "车床", "name_en": "Lathe", "category": "车床系列", "category_en": ""},
            MultiValueDict(),
        )
        product.refresh_from_db()
        self.assertEqual(product.category_en, "Lathes")
        translate.assert_not_called()

    @mock.patch("website.translator.GoogleTranslator")
    def test_failing_translator_stores_native_text(self, translator):
        translator.return_value.translate.side_effect = ConnectionError("offline")
        product = save_product(
            {"name": "液压机", "category": "冲压设备", "description": "500吨级液压机", "description_en": ""},
            MultiValueDict(),
        )
        product.refresh_from_db()
        self.assertEqual(product.description_en, "500吨级液压机")
        self.assertEqual(product.name_en, "液压机")
        self.assertEqual(product.category_en, "冲压设备")


class PublicProductViewTests(TestCase):
    def setUp(self):
        Category.objects.create(name="车床系列", name_en="Lathes")
        Category.objects.create(name="冲压设备", name_en="Presses")
        self.lathe = Product.objects.create(name="车床 X-200", name_en="Lathe X-200",
                                            category="车床系列", category_en="Lathes")
        Product.objects.create(name="车床 X-300", name_en="Lathe X-300",
                               category="车床系列", category_en="Lathes")
        Product.objects.create(name="液压机", name_en="Press", category="冲压设备", category_en="Presses")

    def test_category_counts(self):
        response = self.client.get("/products?lang=en")
        counts = {c["name"]: c["count"] for c in response.context["categories"]}
        self.assertEqual(counts, {"车床系列": 2, "冲压设备": 1})
        self.assertEqual(len(response.context["products"]), 3)

    def test_filter_by_native_or_english_category(self):
        response = self.client.get("/products", {"category": "Lathes"})
        self.assertEqual(len(response.context["products"]), 2)
        response = self.client.get("/products", {"cat": "冲压设备"})
        self.assertEqual([p.name for p in response.context["products"]], ["液压机"])

    def test_detail_and_missing_product(self):
        ProductImage.objects.create(product=self.lathe, image="/images/m.png", is_main=True)
        ProductImage.objects.create(product=self.lathe, image="/images/g.png", is_main=False)
        response = self.client.get(f"/products/{self.lathe.pk}?lang=en")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Lathe X-200")
        self.assertEqual(len(response.context["gallery_images"]), 1)
        self.assertEqual(self.client.get("/products/9999").status_code, 404)

    def test_home_shows_three_products(self):
        Product.objects.create(name="机械臂", name_en="Arm", category="自动化设备")
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context["products"]), 3)


@mock.patch("website.product.safe_translate", side_effect=lambda text, *a, **kw: f"EN:{text}")
class AdminProductViewTests(TempMediaMixin, AdminClientMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.login_admin()

    def test_add_requires_name_and_category(self, translate):
        response = self.client.post("/admin/product/add", {"name": "车床", "category": ""})
        self.assertRedirects(response, "/admin/product/add", fetch_redirect_response=False)
        self.assertFalse(Product.objects.exists())

    def test_add_product_with_image(self, translate):
        response = self.client.post("/admin/product/add", {
            "name": "车床", "category": "车床系列", "description": "高精度",
            "image": make_image("lathe.png"),
        })
        self.assertRedirects(response, "/admin/products?upload_success=1", fetch_redirect_response=False)
        product = Product.objects.get()
        self.assertEqual(product.description_en, "EN:高精度")
        self.assertEqual(product.images.filter(is_main=True).count(), 1)

    def test_edit_redirects_to_dashboard(self, translate):
        product = Product.objects.create(name="车床", category="车床系列")
        response = self.client.post(f"/admin/product/edit/{product.pk}", {
            "name": "新车床", "category": "车床系列", "name_en": "New Lathe",
        })
        self.assertRedirects(response, "/admin/dashboard", fetch_redirect_response=False)
        product.refresh_from_db()
        self.assertEqual(product.name_en, "New Lathe")

    def test_edit_missing_product_redirects(self, translate):
        response = self.client.get("/admin/product/edit/424242")
        self.assertRedirects(response, "/admin/products", fetch_redirect_response=False)

    def test_delete_cascades_to_images(self, translate):
        product = Product.objects.create(name="车床", category="车床系列")
        ProductImage.objects.create(product=product, image="/images/a.png", is_main=True)
        response = self.client.post(f"/admin/product/delete/{product.pk}")
        self.assertRedirects(response, "/admin/dashboard", fetch_redirect_response=False)
        self.assertFalse(Product.objects.exists())
        self.assertFalse(ProductImage.objects.exists())

    def test_image_delete_returns_to_referer(self, translate):
        product = Product.objects.create(name="车床", category="车床系列")
        image = ProductImage.objects.create(product=product, image="/images/a.png", is_main=False)
        response = self.client.post(
            f"/admin/product/image/delete/{image.pk}",
            HTTP_REFERER=f"/admin/product/edit/{product.pk}",
        )
        self.assertRedirects(response, f"/admin/product/edit/{product.pk}", fetch_redirect_response=False)
        self.assertFalse(ProductImage.objects.exists())

    def test_image_delete_ignores_foreign_referer(self, translate):
        response = self.client.post("/admin/product/image/delete/1", HTTP_REFERER="https://evil.example/x")
        self.assertRedirects(response, "/admin/products", fetch_redirect_response=False)
