# services/messages.py
# User-facing text of the recommendations page (Arabic UI).

AUTH_LOADING = "جاري التحميل..."

PAGE_TITLE = "توصيات التخصص الذكية"
PAGE_SUBTITLE = "اكتشف أفضل التخصصات المناسبة لمستواك الأكاديمي"

PREFERENCE_LABEL = "ما هو توجهك المهني؟ (اختياري)"
PREFERENCE_PLACEHOLDER = "مثال: تطوير البرمجيات، البحث العلمي، الصناعة..."

TRIGGER_IDLE = "احصل على التوصيات"
TRIGGER_BUSY = "جاري التحليل..."

REQUEST_FAILED = "فشل في الحصول على التوصيات"
UNEXPECTED_ERROR = "حدث خطأ غير متوقع"

EMPTY_TITLE = "احصل على توصيات ذكية"
EMPTY_MESSAGE = "اضغط على الزر أعلاه للحصول على توصيات مخصصة بناءً على سجلك الأكاديمي"

UNIVERSITY_UNSUPPORTED_TITLE = "هيكل جامعتك غير مدعوم حالياً"
UNIVERSITY_UNSUPPORTED_MESSAGE = (
    "عذراً، لم يتم إضافة الهيكل الأكاديمي لجامعتك بعد إلى نظام التوصيات. "
    "لا يمكننا تقديم توصيات دقيقة بدون معرفة التخصصات المتاحة في جامعتك."
)
UNIVERSITY_CONTRIBUTE = "ساهم بإضافة جامعتك على GitHub"

FIELD_UNSUPPORTED_TITLE = "تخصصك غير مدعوم حالياً"
FIELD_UNSUPPORTED_FALLBACK = "تشكيلة تخصصكم غير متوفرة بعد في نظام التوصيات."
FIELD_UNSUPPORTED_HINT = (
    "جامعتك مدعومة لكن تخصصك الحالي لم يتم إضافته بعد. "
    "يمكنك المساهمة بإضافة تخصصك للمشروع."
)
FIELD_CONTRIBUTE = "ساهم بإضافة تخصصك على GitHub"

STATUS_FIELD = "الميدان"
STATUS_MAJOR = "الفرع"
STATUS_SPECIALITY = "التخصص"
STATUS_ACADEMIC_YEAR = "السنة الدراسية"
UNKNOWN = "غير محدد"

SUMMARY_TITLE = "تحليل الذكاء الاصطناعي"

TYPE_BRANCH = "فرع"
TYPE_SPECIALITY = "تخصص"
TYPE_GRADUATE_PROGRAM = "ماستر"

DETAIL_KEY_SUBJECTS = "المواد الأساسية"
DETAIL_CAREER_OUTCOMES = "الفرص المهنية"
DETAIL_FURTHER_OPTIONS = "خيارات التقدم"

RANK_TITLES = (
    "Top Recommendation",
    "Second Choice",
    "Third Choice",
)
