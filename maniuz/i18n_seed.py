# -*- coding: utf-8 -*-
from typing import Dict

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    # Навигация
    "nav_home": {"uz": "Bosh sahifa", "tr": "Ana Sayfa", "ru": "Главная"},
    "nav_products": {"uz": "Mahsulotlar", "tr": "Ürünler", "ru": "Товары"},
    "nav_cart": {"uz": "Savat", "tr": "Sepet", "ru": "Корзина"},
    "nav_orders": {"uz": "Buyurtmalar", "tr": "Siparişler", "ru": "Заказы"},
    "nav_profile": {"uz": "Profil", "tr": "Profil", "ru": "Профиль"},
    "nav_admin": {"uz": "Admin Panel", "tr": "Admin Paneli", "ru": "Админ Панель"},
    "nav_login": {"uz": "Kirish", "tr": "Giriş Yap", "ru": "Войти"},
    "nav_register": {"uz": "Ro'yxatdan o'tish", "tr": "Kayıt Ol", "ru": "Регистрация"},
    "nav_logout": {"uz": "Chiqish", "tr": "Çıkış Yap", "ru": "Выйти"},

    # Каталог
    "products_title": {"uz": "Mahsulotlar", "tr": "Ürünler", "ru": "Товары"},
    "products_empty": {"uz": "Hozircha mahsulot yo'q", "tr": "Henüz ürün yok", "ru": "Пока нет товаров"},
    "product_add_to_cart": {"uz": "Savatga qo'shish", "tr": "Sepete Ekle", "ru": "Добавить в корзину"},
    "product_view_details": {"uz": "Batafsil ko'rish", "tr": "Detaylar", "ru": "Подробности"},
    "product_stock": {"uz": "Omborda", "tr": "Stok", "ru": "На складе"},
    "product_pieces": {"uz": "dona", "tr": "adet", "ru": "шт."},
    "product_out_of_stock": {"uz": "Omborda yo'q", "tr": "Stokta yok", "ru": "Нет в наличии"},
    "product_price": {"uz": "Narx", "tr": "Fiyat", "ru": "Цена"},
    "product_box_price": {"uz": "Quti narxi", "tr": "Koli fiyatı", "ru": "Цена за коробку"},
    "product_items_per_box": {"uz": "Qutida", "tr": "Kolide", "ru": "В коробке"},
    "product_description": {"uz": "Ta'rif", "tr": "Açıklama", "ru": "Описание"},
    "product_quantity": {"uz": "Miqdor", "tr": "Miktar", "ru": "Количество"},
    "product_details": {"uz": "Mahsulot tafsilotlari", "tr": "Ürün Detayları", "ru": "Информация о товаре"},
    "product_back": {"uz": "Orqaga", "tr": "Geri", "ru": "Назад"},
    "product_not_found": {"uz": "Mahsulot topilmadi", "tr": "Ürün bulunamadı", "ru": "Товар не найден"},
    "unit_piece": {"uz": "Dona", "tr": "Adet", "ru": "Штука"},
    "unit_box": {"uz": "Quti", "tr": "Koli", "ru": "Коробка"},
    "view_price": {
        "uz": "Narxni ko'rish uchun kiring",
        "tr": "Fiyat görmek için giriş yapın",
        "ru": "Войдите, чтобы увидеть цену",
    },
    "currency_symbol": {"uz": "so'm", "tr": "UZS", "ru": "сум"},

    # Корзина
    "cart_title": {"uz": "Savat", "tr": "Sepet", "ru": "Корзина"},
    "cart_empty": {"uz": "Savatchangiz bo'sh", "tr": "Sepetiniz boş", "ru": "Ваша корзина пуста"},
    "cart_total": {"uz": "Jami", "tr": "Toplam", "ru": "Итого"},
    "cart_delivery_type": {"uz": "Yetkazib berish turi", "tr": "Teslimat Türü", "ru": "Тип доставки"},
    "cart_pickup": {"uz": "O'zim olib ketaman", "tr": "Kendim alacağım", "ru": "Самовывоз"},
    "cart_delivery": {"uz": "Yetkazib berish kerak", "tr": "Teslimat gerekli", "ru": "Доставка"},
    "cart_address": {"uz": "Yetkazib berish manzili", "tr": "Teslimat adresi", "ru": "Адрес доставки"},
    "cart_complete_order": {"uz": "Buyurtmani rasmiylashtirish", "tr": "Siparişi Tamamla", "ru": "Оформить заказ"},
    "cart_remove": {"uz": "O'chirish", "tr": "Kaldır", "ru": "Удалить"},
    "cart_update": {"uz": "Yangilash", "tr": "Güncelle", "ru": "Обновить"},
    "cart_continue_shopping": {"uz": "Xaridni davom ettirish", "tr": "Alışverişe Devam Et", "ru": "Продолжить покупки"},
    "cart_item_added": {"uz": "Savatga qo'shildi", "tr": "Sepete eklendi", "ru": "Добавлено в корзину"},

    # Заказы
    "orders_title": {"uz": "Mening buyurtmalarim", "tr": "Siparişlerim", "ru": "Мои заказы"},
    "orders_empty": {"uz": "Sizda hali buyurtmalar yo'q", "tr": "Henüz siparişiniz yok", "ru": "У вас пока нет заказов"},
    "orders_date": {"uz": "Sana", "tr": "Tarih", "ru": "Дата"},
    "orders_status": {"uz": "Holati", "tr": "Durum", "ru": "Статус"},
    "orders_total": {"uz": "Summa", "tr": "Tutar", "ru": "Сумма"},
    "orders_delivery": {"uz": "Yetkazib berish", "tr": "Teslimat", "ru": "Доставка"},
    "order_items": {"uz": "Mahsulotlar", "tr": "Ürünler", "ru": "Товары"},
    "order_status_pending": {"uz": "Kutilmoqda", "tr": "Beklemede", "ru": "Ожидание"},
    "order_status_preparing": {"uz": "Tayyorlanmoqda", "tr": "Hazırlanıyor", "ru": "Готовится"},
    "order_status_delivering": {"uz": "Yetkazilmoqda", "tr": "Teslim Ediliyor", "ru": "Доставляется"},
    "order_status_completed": {"uz": "Bajarildi", "tr": "Tamamlandı", "ru": "Выполнен"},
    "order_created": {"uz": "Buyurtma qabul qilindi", "tr": "Sipariş alındı", "ru": "Заказ принят"},
    "order_error_stock": {
        "uz": "Omborda yetarli mahsulot yo'q",
        "tr": "Yeterli stok yok",
        "ru": "Недостаточно товара на складе",
    },
    "order_error_product_missing": {
        "uz": "Savatdagi mahsulot endi mavjud emas",
        "tr": "Sepetteki ürün artık mevcut değil",
        "ru": "Товар из корзины больше не доступен",
    },
    "order_error_delivery_type": {
        "uz": "Yetkazib berish turi noto'g'ri",
        "tr": "Geçersiz teslimat türü",
        "ru": "Неверный тип доставки",
    },
    "order_error_line": {"uz": "Savatdagi qator noto'g'ri", "tr": "Geçersiz sepet satırı", "ru": "Неверная строка корзины"},
    "order_error_status": {"uz": "Holat noto'g'ri", "tr": "Geçersiz durum", "ru": "Неверный статус"},
    "order_not_found": {"uz": "Buyurtma topilmadi", "tr": "Sipariş bulunamadı", "ru": "Заказ не найден"},
    "partnership_error_status": {"uz": "Holat noto'g'ri", "tr": "Geçersiz durum", "ru": "Неверный статус"},
    "partnership_not_found": {"uz": "Ariza topilmadi", "tr": "Başvuru bulunamadı", "ru": "Заявка не найдена"},
    "customer_not_found": {"uz": "Mijoz topilmadi", "tr": "Müşteri bulunamadı", "ru": "Клиент не найден"},

    # Вход / регистрация
    "login_title": {"uz": "Kirish", "tr": "Giriş Yap", "ru": "Войти"},
    "login_email": {"uz": "Email", "tr": "E-posta", "ru": "Email"},
    "login_password": {"uz": "Parol", "tr": "Şifre", "ru": "Пароль"},
    "login_button": {"uz": "Kirish", "tr": "Giriş Yap", "ru": "Войти"},
    "login_no_account": {"uz": "Hisobingiz yo'qmi?", "tr": "Hesabınız yok mu?", "ru": "Нет аккаунта?"},
    "login_error": {"uz": "Xato yuz berdi", "tr": "Hata oluştu", "ru": "Произошла ошибка"},
    "register_title": {"uz": "Ro'yxatdan o'tish", "tr": "Kayıt Ol", "ru": "Регистрация"},
    "register_name": {"uz": "Ism", "tr": "İsim", "ru": "Имя"},
    "register_nickname": {"uz": "Taxallus", "tr": "Kullanıcı adı", "ru": "Никнейм"},
    "register_phone": {"uz": "Telefon", "tr": "Telefon", "ru": "Телефон"},
    "register_confirm_password": {"uz": "Parolni tasdiqlang", "tr": "Şifreyi onaylayın", "ru": "Подтвердите пароль"},
    "register_button": {"uz": "Ro'yxatdan o'tish", "tr": "Kayıt Ol", "ru": "Зарегистрироваться"},
    "register_have_account": {"uz": "Hisobingiz bormi?", "tr": "Hesabınız var mı?", "ru": "Уже есть аккаунт?"},
    "validation_password_mismatch": {
        "uz": "Parollar mos kelmadi",
        "tr": "Şifreler eşleşmiyor",
        "ru": "Пароли не совпадают",
    },
    "validation_password_length": {
        "uz": "Parol kamida 6 belgidan iborat bo'lishi kerak",
        "tr": "Şifre en az 6 karakter olmalıdır",
        "ru": "Пароль должен содержать не менее 6 символов",
    },
    "validation_phone": {
        "uz": "Telefon +998XXXXXXXXX formatida bo'lishi kerak",
        "tr": "Telefon +998XXXXXXXXX formatında olmalıdır",
        "ru": "Телефон должен быть в формате +998XXXXXXXXX",
    },
    "validation_email": {"uz": "Email noto'g'ri", "tr": "Geçersiz e-posta", "ru": "Некорректный email"},
    "validation_name": {"uz": "Ismni kiriting", "tr": "İsim girin", "ru": "Введите имя"},
    "email_taken": {"uz": "Bu email band", "tr": "Bu e-posta kullanımda", "ru": "Этот email уже занят"},
    "nickname_taken": {"uz": "Bu taxallus band", "tr": "Bu kullanıcı adı alınmış", "ru": "Этот никнейм занят"},
    "nickname_available": {"uz": "Taxallus bo'sh", "tr": "Kullanıcı adı uygun", "ru": "Никнейм свободен"},
    "nickname_too_short": {
        "uz": "Taxallus kamida 3 belgi",
        "tr": "Kullanıcı adı en az 3 karakter",
        "ru": "Никнейм не короче 3 символов",
    },
    "nickname_too_long": {
        "uz": "Taxallus ko'pi bilan 20 belgi",
        "tr": "Kullanıcı adı en fazla 20 karakter",
        "ru": "Никнейм не длиннее 20 символов",
    },
    "nickname_invalid_format": {
        "uz": "Faqat kichik lotin harflari, raqamlar va _ ; harf bilan boshlansin",
        "tr": "Yalnızca küçük harf, rakam ve _ ; harfle başlamalı",
        "ru": "Только строчные латинские буквы, цифры и _ ; начинается с буквы",
    },
    "error_checking_nickname": {
        "uz": "Taxallusni tekshirib bo'lmadi",
        "tr": "Kullanıcı adı kontrol edilemedi",
        "ru": "Не удалось проверить никнейм",
    },

    # Профиль
    "profile_title": {"uz": "Profil", "tr": "Profil", "ru": "Профиль"},
    "profile_name": {"uz": "Ism", "tr": "İsim", "ru": "Имя"},
    "profile_email": {"uz": "Email", "tr": "E-posta", "ru": "Email"},
    "profile_price_type": {"uz": "Narx turi", "tr": "Fiyat Türü", "ru": "Тип цены"},
    "profile_role": {"uz": "Rol", "tr": "Rol", "ru": "Роль"},
    "no_price_type": {"uz": "Narx turi yo'q", "tr": "Fiyat türü yok", "ru": "Нет типа цены"},

    # Админка
    "admin_dashboard": {"uz": "Boshqaruv paneli", "tr": "Kontrol Paneli", "ru": "Панель управления"},
    "admin_products": {"uz": "Mahsulotlar", "tr": "Ürünler", "ru": "Товары"},
    "admin_customers": {"uz": "Mijozlar", "tr": "Müşteriler", "ru": "Клиенты"},
    "admin_orders": {"uz": "Buyurtmalar", "tr": "Siparişler", "ru": "Заказы"},
    "admin_price_types": {"uz": "Narx turlari", "tr": "Fiyat Türleri", "ru": "Типы цен"},
    "admin_translations": {"uz": "Tarjimalar", "tr": "Çeviriler", "ru": "Переводы"},
    "admin_partnerships": {"uz": "Hamkorlik arizalari", "tr": "Ortaklık başvuruları", "ru": "Заявки на партнёрство"},
    "admin_messages": {"uz": "Xabarlar", "tr": "Mesajlar", "ru": "Сообщения"},
    "admin_settings": {"uz": "Sozlamalar", "tr": "Ayarlar", "ru": "Настройки"},
    "admin_backup": {"uz": "Zaxira nusxa", "tr": "Yedekleme", "ru": "Резервная копия"},
    "admin_add_product": {"uz": "Mahsulot qo'shish", "tr": "Ürün Ekle", "ru": "Добавить товар"},
    "admin_edit": {"uz": "Tahrirlash", "tr": "Düzenle", "ru": "Редактировать"},
    "admin_delete": {"uz": "O'chirish", "tr": "Sil", "ru": "Удалить"},
    "admin_save": {"uz": "Saqlash", "tr": "Kaydet", "ru": "Сохранить"},
    "admin_cancel": {"uz": "Bekor qilish", "tr": "İptal", "ru": "Отмена"},
    "admin_total_products": {"uz": "Jami mahsulotlar", "tr": "Toplam Ürün", "ru": "Всего товаров"},
    "admin_total_customers": {"uz": "Jami mijozlar", "tr": "Toplam Müşteri", "ru": "Всего клиентов"},
    "admin_total_orders": {"uz": "Jami buyurtmalar", "tr": "Toplam Sipariş", "ru": "Всего заказов"},
    "admin_seed_data": {"uz": "Ma'lumot qo'shish", "tr": "Veri Ekle", "ru": "Добавить данные"},
    "admin_home": {"uz": "Bosh sahifa", "tr": "Ana Sayfa", "ru": "Главная"},
    "admin_only_feature": {
        "uz": "Faqat administratorlar uchun",
        "tr": "Yalnızca yöneticiler için",
        "ru": "Только для администраторов",
    },
    "admin_pending_orders": {"uz": "Kutilayotgan buyurtmalar", "tr": "Bekleyen Siparişler", "ru": "Ожидающие заказы"},
    "admin_unread_messages": {"uz": "O'qilmagan xabarlar", "tr": "Okunmamış Mesajlar", "ru": "Непрочитанные сообщения"},
    "admin_mark_read": {"uz": "O'qildi", "tr": "Okundu", "ru": "Прочитано"},
    "admin_download_pdf": {"uz": "PDF yuklab olish", "tr": "PDF İndir", "ru": "Скачать PDF"},
    "admin_name": {"uz": "Nomi", "tr": "Adı", "ru": "Название"},
    "admin_description": {"uz": "Ta'rif", "tr": "Açıklama", "ru": "Описание"},
    "admin_image_url": {"uz": "Rasm havolasi", "tr": "Resim URL", "ru": "Ссылка на изображение"},
    "admin_key": {"uz": "Kalit", "tr": "Anahtar", "ru": "Ключ"},
    "admin_seed_translations": {"uz": "Tarjimalarni yuklash", "tr": "Çevirileri Yükle", "ru": "Загрузить переводы"},
    "admin_fix_items_per_box": {
        "uz": "Qutidagi sonini to'ldirish",
        "tr": "Koli adetlerini doldur",
        "ru": "Заполнить количество в коробке",
    },
    "seed_already_done": {
        "uz": "Ma'lumotlar allaqachon mavjud",
        "tr": "Veriler zaten mevcut",
        "ru": "Данные уже существуют",
    },
    "settings_store_location": {"uz": "Do'kon joylashuvi", "tr": "Mağaza Konumu", "ru": "Расположение магазина"},
    "customer_updated_success": {"uz": "Mijoz yangilandi", "tr": "Müşteri güncellendi", "ru": "Клиент обновлён"},
    "error_updating_customer": {
        "uz": "Mijozni yangilab bo'lmadi",
        "tr": "Müşteri güncellenemedi",
        "ru": "Не удалось обновить клиента",
    },
    "settings_saved": {"uz": "Sozlamalar saqlandi", "tr": "Ayarlar kaydedildi", "ru": "Настройки сохранены"},
    "settings_default_price_type": {
        "uz": "Standart narx turi",
        "tr": "Varsayılan fiyat türü",
        "ru": "Тип цены по умолчанию",
    },
    "settings_test_mode": {"uz": "Test rejimi", "tr": "Test modu", "ru": "Тестовый режим"},
    "test_mode_banner": {
        "uz": "Sayt test rejimida ishlamoqda. Buyurtmalar bajarilmasligi mumkin.",
        "tr": "Site test modunda. Siparişler işlenmeyebilir.",
        "ru": "Сайт работает в тестовом режиме. Заказы могут не выполняться.",
    },

    # Футер и страницы
    "footer_about": {"uz": "Biz haqimizda", "tr": "Hakkımızda", "ru": "О нас"},
    "footer_partnership": {"uz": "Hamkorlik", "tr": "İş Ortaklığı", "ru": "Сотрудничество"},
    "footer_contact": {"uz": "Aloqa", "tr": "İletişim", "ru": "Контакты"},
    "footer_terms": {"uz": "Foydalanish shartlari", "tr": "Kullanım Şartları", "ru": "Условия использования"},
    "footer_rights": {"uz": "Barcha huquqlar himoyalangan", "tr": "Tüm hakları saklıdır", "ru": "Все права защищены"},
    "about_title": {"uz": "Biz haqimizda", "tr": "Hakkımızda", "ru": "О нас"},
    "about_content": {
        "uz": "Maniuz - sovuq va energetik ichimliklar sotuvchi yetakchi kompaniya.",
        "tr": "Maniuz - soğuk ve enerji içecekleri satan lider şirket.",
        "ru": "Maniuz - ведущая компания по продаже холодных и энергетических напитков.",
    },
    "terms_title": {"uz": "Foydalanish shartlari", "tr": "Kullanım Şartları", "ru": "Условия использования"},
    "terms_content": {
        "uz": "Saytdan foydalanish orqali siz ushbu shartlarga rozilik bildirasiz.",
        "tr": "Siteyi kullanarak bu şartları kabul etmiş olursunuz.",
        "ru": "Используя сайт, вы соглашаетесь с этими условиями.",
    },
    "partnership_title": {"uz": "Biznes hamkorlik", "tr": "İş Ortaklığı", "ru": "Бизнес партнерство"},
    "partnership_content": {
        "uz": "Bizning hamkorimiz bo'ling va yuqori daromad oling!",
        "tr": "Ortağımız olun ve yüksek gelir elde edin!",
        "ru": "Станьте нашим партнером и получайте высокий доход!",
    },
    "partnership_your_name": {"uz": "Ismingiz", "tr": "Adınız", "ru": "Ваше имя"},
    "partnership_your_email": {"uz": "Email manzilingiz", "tr": "E-posta Adresiniz", "ru": "Ваш email"},
    "partnership_your_phone": {"uz": "Telefon raqamingiz", "tr": "Telefon Numaranız", "ru": "Ваш телефон"},
    "partnership_message": {"uz": "Xabar", "tr": "Mesaj", "ru": "Сообщение"},
    "partnership_submit": {"uz": "Yuborish", "tr": "Gönder", "ru": "Отправить"},
    "partnership_success": {
        "uz": "Arizangiz muvaffaqiyatli yuborildi!",
        "tr": "Başvurunuz başarıyla gönderildi!",
        "ru": "Ваша заявка успешно отправлена!",
    },
    "partnership_status": {"uz": "Holati", "tr": "Durum", "ru": "Статус"},
    "partnership_notes": {"uz": "Izohlar", "tr": "Notlar", "ru": "Заметки"},
    "partnership_status_pending": {"uz": "Kutilmoqda", "tr": "Beklemede", "ru": "Ожидает"},
    "partnership_status_contacted": {"uz": "Bog'lanildi", "tr": "İletişime geçildi", "ru": "Связались"},
    "partnership_status_approved": {"uz": "Tasdiqlandi", "tr": "Onaylandı", "ru": "Одобрена"},
    "partnership_status_rejected": {"uz": "Rad etildi", "tr": "Reddedildi", "ru": "Отклонена"},
    "contact_title": {"uz": "Biz bilan bog'laning", "tr": "Bize Ulaşın", "ru": "Свяжитесь с нами"},
    "contact_name": {"uz": "Ismingiz", "tr": "Adınız", "ru": "Ваше имя"},
    "contact_message": {"uz": "Xabaringiz", "tr": "Mesajınız", "ru": "Ваше сообщение"},
    "contact_send": {"uz": "Yuborish", "tr": "Gönder", "ru": "Отправить"},
    "contact_success": {"uz": "Xabaringiz yuborildi!", "tr": "Mesajınız gönderildi!", "ru": "Ваше сообщение отправлено!"},

    # Общее
    "loading": {"uz": "Yuklanmoqda...", "tr": "Yükleniyor...", "ru": "Загрузка..."},
    "error": {"uz": "Xato", "tr": "Hata", "ru": "Ошибка"},
    "success": {"uz": "Muvaffaqiyatli", "tr": "Başarılı", "ru": "Успешно"},
    "search": {"uz": "Qidirish", "tr": "Ara", "ru": "Поиск"},
    "filter": {"uz": "Filtr", "tr": "Filtre", "ru": "Фильтр"},
    "all": {"uz": "Hammasi", "tr": "Tümü", "ru": "Все"},
    "address_label": {"uz": "Manzil", "tr": "Adres", "ru": "Адрес"},
    "latitude": {"uz": "Kenglik", "tr": "Enlem", "ru": "Широта"},
    "longitude": {"uz": "Uzunlik", "tr": "Boylam", "ru": "Долгота"},
}


def by_language(lang: str) -> Dict[str, str]:
    return {key: values[lang] for key, values in TRANSLATIONS.items() if lang in values}
