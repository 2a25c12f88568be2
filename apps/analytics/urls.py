from django.urls import path
from . import views

urlpatterns = [
    path('email/metrics/', views.channel_metrics, {'channel': 'email'}, name='email_metrics'),
    path('direct-mail/metrics/', views.channel_metrics, {'channel': 'direct_mail'}, name='direct_mail_metrics'),
    path('paid-social/metrics/', views.channel_metrics, {'channel': 'paid_social'}, name='paid_social_metrics'),
    path('paid-search/metrics/', views.channel_metrics, {'channel': 'paid_search'}, name='paid_search_metrics'),
    path('web/metrics/', views.channel_metrics, {'channel': 'web'}, name='web_metrics'),
    path('channels/overview/', views.channel_overview, name='channel_overview'),
    path('campaigns/aggregation/', views.campaign_aggregation, name='campaign_aggregation'),
    path('accounts/', views.bound_accounts, name='bound_accounts'),
    path('reports/', views.queue_channel_report, name='channel_reports'),
]
