from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(blank=True, default='', max_length=150)),
                ('phone', models.CharField(blank=True, default='', max_length=30)),
                ('address', models.TextField(blank=True, default='')),
                ('latitude', models.FloatField(blank=True, null=True)),
                ('longitude', models.FloatField(blank=True, null=True)),
                ('dietary_restrictions', models.TextField(blank=True, default='')),
                ('preferences', models.TextField(blank=True, default='')),
                ('include_cutlery', models.BooleanField(default=False)),
                ('delivery_fee', models.DecimalField(blank=True, decimal_places=2, help_text='Flat fee added once to every order; set by admins', max_digits=8, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='Order',
            fields=[
                ('order_id', models.AutoField(primary_key=True, serialize=False)),
                ('customer_name', models.CharField(blank=True, default='', max_length=150)),
                ('customer_phone', models.CharField(blank=True, default='', max_length=30)),
                ('customer_address', models.TextField(blank=True, default='')),
                ('cart_items', models.JSONField(default=list)),
                ('delivery_days', models.JSONField(default=list)),
                ('special_requests', models.TextField(blank=True, default='')),
                ('payment_method', models.CharField(choices=[('cash', 'Cash on delivery/pick up'), ('cheque', 'Cheque (written to Green Box)'), ('bank_transfer_fcib', 'Bank Transfer (FCIB 1st Pay)'), ('bank_transfer_rbc', 'Bank Transfer RBC'), ('usd_transfer', 'Venmo/Cash App/Zelle (USD transfer)'), ('online_link', 'Online Payment link (VISA/MasterCard)')], max_length=30)),
                ('subtotal', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('delivery_fee', models.DecimalField(decimal_places=2, default=0, max_digits=8)),
                ('total_amount', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('delivered', 'Delivered'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at', '-order_id'],
            },
        ),
    ]
