from .user import User, Session
from .page import Page
from .category import ProductCategory
from .product import Product
from .news import News
from .content import Solution, Service, SupportArticle
from .faq import FAQ
from .navigation import NavigationItem
from .section_content import SectionContent
from .legal import LegalDocument
from .download import Download
from .media import MediaCategory, MediaAsset, MediaVersion, MediaUsage, MediaProperty
from .contact import ContactForm, NotificationConfig, ContactSetting, GlobalOffice
from .setting import Setting, GlobalSEO
from .social_media import SocialMedia
from .seo import KeywordRanking, CompetitorAnalysis
